# wengert/core/graph_utils.py
"""
Tape inspection helpers.
Summaries and text dumps of a recorded computation graph, for debugging.
"""

import numpy as np
from typing import Dict, List
from collections import Counter


def _fan_counts(tape):
    n_nodes = len(tape)
    fan_ins: List[int] = []
    fan_outs = [0] * n_nodes
    for i, node in enumerate(tape):
        deps = [dep for dep, _ in node.edges(i)]
        fan_ins.append(len(deps))
        for dep in deps:
            fan_outs[dep] += 1
    return fan_ins, fan_outs


def get_graph_stats(tape) -> Dict:
    """
    Collect statistics for a tape (nothing is printed).

    Returns
    -------
    dict with node/edge/leaf counts, fan-in and fan-out maxima and means,
    and an operation histogram.
    """
    if len(tape) == 0:
        return {
            'nodes': 0,
            'edges': 0,
            'leaves': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    fan_ins, fan_outs = _fan_counts(tape)
    op_counter = Counter(node.op for node in tape)

    return {
        'nodes': len(tape),
        'edges': sum(fan_ins),
        'leaves': op_counter.get('leaf', 0),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def format_graph(tape, max_nodes: int = 20) -> str:
    """
    Render the first `max_nodes` nodes of a tape, one per line:

        Node    0: leaf         [leaf/input]
        Node    2: mul          <- [Node0 (4.2), Node1 (0.5)]
    """
    if len(tape) == 0:
        return "Empty graph"

    lines = []
    for i, node in enumerate(tape.nodes[:max_nodes]):
        edges = list(node.edges(i))
        if edges:
            parent_info = ", ".join(f"Node{dep} ({weight:.6g})" for dep, weight in edges)
            lines.append(f"Node {i:4d}: {node.op:12s} <- [{parent_info}]")
        else:
            lines.append(f"Node {i:4d}: {node.op:12s} [leaf/input]")

    if len(tape) > max_nodes:
        lines.append(f"... ({len(tape) - max_nodes} more nodes)")
    return "\n".join(lines)


def analyze_graph_complexity(tape) -> str:
    """
    Short text report on the size and shape of a tape.
    """
    stats = get_graph_stats(tape)

    if stats['nodes'] == 0:
        return "Empty computation graph"

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total operations: {stats['nodes']:,}")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"

    report.append(f"  Complexity level: {complexity}")

    if stats['operations']:
        top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
        report.append("  Top operations:")
        for op, count in top_ops:
            pct = 100.0 * count / stats['nodes']
            report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
