#!/usr/bin/env python3
"""
HTML/SVG showcase of spectral clustering.

Clusters a few structured graphs with both Laplacian strategies and draws
each node at its 2-D spectral embedding, colored by cluster.

Usage:
    python scripts/showcase.py

Output:
    build/showcase.html
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from html import escape
from pathlib import Path
from typing import Any

from graph_spectral import Graph, Node, SpectralClustering, SpectralClusteringError

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"

# SVG dimensions
SVG_WIDTH = 400
SVG_HEIGHT = 350
PADDING = 30

PALETTE = ["#e6194b", "#3cb44b", "#4363d8", "#f58231", "#911eb4", "#42d4f4", "#f032e6", "#bfef45"]


@dataclass
class RunSpec:
    """Options for one clustering run."""

    name: str
    options: dict[str, Any]


RUNS: list[RunSpec] = [
    RunSpec("Connected, automatic k", {"laplacianMatrix": "connected"}),
    RunSpec("Connected, k = 2", {"laplacianMatrix": "connected", "requestedNbClusters": 2}),
    RunSpec("Distance, automatic k", {"laplacianMatrix": "distance"}),
]


def generate_cliques(sizes: tuple[int, ...], seed: int = 42) -> Graph:
    """Cliques laid out on small circles, chained by single bridges."""
    rng = random.Random(seed)
    graph = Graph()
    starts = []
    for c, size in enumerate(sizes):
        starts.append(len(graph))
        cx, cy = 100.0 * c, 50.0 * (c % 2)
        for k in range(size):
            angle = 2 * math.pi * k / size
            point = (
                cx + 15 * math.cos(angle) + rng.uniform(-2, 2),
                cy + 15 * math.sin(angle) + rng.uniform(-2, 2),
            )
            graph.add_node(Node(id=len(graph), point=point))
        for i in range(starts[-1], starts[-1] + size):
            for j in range(i + 1, starts[-1] + size):
                graph.add_link(i, j)
    for a, b in zip(starts, starts[1:]):
        graph.add_link(a, b)
    return graph


def generate_grid(rows: int, cols: int, spacing: float = 10.0) -> Graph:
    """Rectangular grid graph with nodes on lattice points."""
    nodes = [
        {"id": f"{r},{c}", "point": (spacing * c, spacing * r)}
        for r in range(rows)
        for c in range(cols)
    ]
    links = []
    for r in range(rows):
        for c in range(cols):
            if c + 1 < cols:
                links.append((f"{r},{c}", f"{r},{c + 1}"))
            if r + 1 < rows:
                links.append((f"{r},{c}", f"{r + 1},{c}"))
    return Graph(nodes=nodes, links=links)


def run_to_svg(graph: Graph, spec: RunSpec) -> str:
    """Cluster the graph and draw its spectral embedding."""
    clustering = SpectralClustering(graph)
    clustering.compute(spec.options)
    projection = clustering.get_projection(spec.options, dimensions=2)

    xs = [p[0] for p in projection.values()]
    ys = [p[1] for p in projection.values()]
    span_x = (max(xs) - min(xs)) or 1.0
    span_y = (max(ys) - min(ys)) or 1.0

    def to_canvas(coords: list[float]) -> tuple[float, float]:
        x = PADDING + (coords[0] - min(xs)) / span_x * (SVG_WIDTH - 2 * PADDING)
        y = PADDING + (coords[1] - min(ys)) / span_y * (SVG_HEIGHT - 2 * PADDING)
        return x, y

    parts = [f'<svg width="{SVG_WIDTH}" height="{SVG_HEIGHT}" xmlns="http://www.w3.org/2000/svg">']
    for link in graph.links:
        x1, y1 = to_canvas(projection[link.source.id])
        x2, y2 = to_canvas(projection[link.target.id])
        parts.append(
            f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" stroke="#bbb"/>'
        )
    for node in graph.get_nodes():
        x, y = to_canvas(projection[node.id])
        color = PALETTE[(node.cluster or 0) % len(PALETTE)]
        parts.append(f'<circle cx="{x:.1f}" cy="{y:.1f}" r="6" fill="{color}"/>')
    parts.append("</svg>")

    n_clusters = len({node.cluster for node in graph.get_nodes()})
    return f"<h3>{escape(spec.name)} ({n_clusters} clusters)</h3>\n" + "\n".join(parts)


def generate_html(sections: list[tuple[str, list[str]]]) -> str:
    """Assemble the showcase page."""
    html_parts = [
        """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Spectral Clustering Showcase</title>
    <style>
        body { font-family: sans-serif; margin: 2em; }
        .graph-grid { display: flex; flex-wrap: wrap; gap: 1em; }
        .graph-card { border: 1px solid #ddd; padding: 0.5em; }
    </style>
</head>
<body>
    <h1>Spectral Clustering Showcase</h1>
    <p>Nodes drawn at eigenvector columns 1 and 2, colored by Fiedler-vector cluster</p>
"""
    ]

    for section_title, svgs in sections:
        html_parts.append(f"    <section>\n        <h2>{escape(section_title)}</h2>")
        html_parts.append('        <div class="graph-grid">')
        for svg in svgs:
            html_parts.append(f'            <div class="graph-card">\n{svg}\n            </div>')
        html_parts.append("        </div>\n    </section>")

    html_parts.append("</body>\n</html>")
    return "\n".join(html_parts)


def main() -> None:
    """Generate the showcase HTML."""
    BUILD_DIR.mkdir(exist_ok=True)

    graphs = {
        "Three cliques (5+6+4)": lambda: generate_cliques((5, 6, 4)),
        "Grid (4x6)": lambda: generate_grid(4, 6),
    }

    sections = []
    for graph_name, factory in graphs.items():
        print(f"\nProcessing: {graph_name}")
        svgs = []
        for spec in RUNS:
            graph = factory()
            try:
                print(f"  Running {spec.name}...")
                svgs.append(run_to_svg(graph, spec))
            except SpectralClusteringError as e:
                print(f"    Error: {e}")
        sections.append((graph_name, svgs))

    output_path = BUILD_DIR / "showcase.html"
    output_path.write_text(generate_html(sections))
    print(f"\nShowcase saved to: {output_path.absolute()}")


if __name__ == "__main__":
    main()
