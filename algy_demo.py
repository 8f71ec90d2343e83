#!/usr/bin/env python3
"""
command line harness for the algy structures.
each demo builds a structure from seeded random data, runs its public operations
and prints what came out together with how long it took.
"""

import logging
import random
import sys
import time
from dataclasses import dataclass, asdict
from typing import Callable, Dict, List, Optional

from algy import (
    bst_of, heap_of, graph_from_edges, sequence_of, linked_list_of, stack_of,
    merge_sort, merge_sort_bottom_up, fib_memo, fib_tabulation,
    next_greater_values, UnderflowError
)

logger = logging.getLogger(__name__)


@dataclass
class DemoConfig:
    """configuration for a demo run"""
    size: int = 12
    seed: int = 7
    fib_n: int = 30
    verbose: bool = False


def _values(config: DemoConfig) -> List[int]:
    rng = random.Random(config.seed)
    return [rng.randint(0, 99) for _ in range(config.size)]


# --- demos: each returns printable lines ---

def demo_sequence(config: DemoConfig) -> List[str]:
    sequence = sequence_of(_values(config))
    removed = sequence.remove_at(0) if sequence else None
    return [f"values: {sequence.to.list()}",
            f"length {len(sequence)}, capacity {sequence.capacity}, removed head {removed}"]


def demo_linked_list(config: DemoConfig) -> List[str]:
    chain = linked_list_of(_values(config))
    before = chain.to.list()
    chain.reverse()
    return [f"forward:  {before}", f"reversed: {chain.to.list()}"]


def demo_stack(config: DemoConfig) -> List[str]:
    values = _values(config)
    stack = stack_of(values)
    popped = [stack.pop() for _ in range(min(3, len(stack)))]
    return [f"popped: {popped}",
            f"next greater: {next_greater_values(values)}"]


def demo_bst(config: DemoConfig) -> List[str]:
    values = _values(config)
    tree = bst_of(values)
    return [f"inserted {len(values)} values, kept {len(tree)}, height {tree.height()}",
            f"in order: {tree.in_order().to.list()}"]


def demo_heap(config: DemoConfig) -> List[str]:
    heap = heap_of(_values(config))
    return [f"drained: {heap.drain().to.list()}"]


def demo_graph(config: DemoConfig) -> List[str]:
    rng = random.Random(config.seed)
    edges = [(rng.randrange(config.size), rng.randrange(config.size)) for _ in range(config.size)]
    graph = graph_from_edges(edges)
    start = edges[0][0] if edges else 0
    return [f"edges: {graph.edges()}",
            f"bfs({start}): {graph.bfs(start).to.list()}",
            f"dfs({start}): {graph.dfs(start).to.list()}"]


def demo_sort(config: DemoConfig) -> List[str]:
    values = _values(config)
    return [f"input:     {values}",
            f"top-down:  {merge_sort(values)}",
            f"bottom-up: {merge_sort_bottom_up(values)}"]


def demo_memo(config: DemoConfig) -> List[str]:
    return [f"fib_memo({config.fib_n}) = {fib_memo(config.fib_n)}",
            f"fib_tabulation({config.fib_n}) = {fib_tabulation(config.fib_n)}"]


DEMOS: Dict[str, Callable[[DemoConfig], List[str]]] = {
    'sequence': demo_sequence,
    'linked-list': demo_linked_list,
    'stack': demo_stack,
    'bst': demo_bst,
    'heap': demo_heap,
    'graph': demo_graph,
    'sort': demo_sort,
    'memo': demo_memo,
}


def run_demos(names: List[str], config: DemoConfig) -> Dict[str, float]:
    """run the named demos in order, printing their output. returns durations in ms."""
    timings = {}
    for name in names:
        start_time = time.perf_counter()
        lines = DEMOS[name](config)
        timings[name] = (time.perf_counter() - start_time) * 1000

        print(f"\n=== {name} ({timings[name]:.2f}ms) ===")
        for line in lines:
            print(f"  {line}")
    return timings


# command line interface for the demo harness
def create_cli_interface():
    """create command line interface for the demo harness"""
    import argparse

    parser = argparse.ArgumentParser(
        description='algy demos - exercise the in-memory data structures',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python algy_demo.py all
  python algy_demo.py bst heap --size 20 --seed 3
  python algy_demo.py memo --fib-n 80 --verbose
        '''
    )

    parser.add_argument('demos', nargs='*', metavar='demo',
                        help=f"Demos to run: all, {', '.join(DEMOS)} (default: all)")
    parser.add_argument('--size', type=int, default=12, help='Number of generated values (default: 12)')
    parser.add_argument('--seed', type=int, default=7, help='Random seed (default: 7)')
    parser.add_argument('--fib-n', type=int, default=30, help='Fibonacci index for the memo demo (default: 30)')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_cli_interface()
    args = parser.parse_args(argv)
    unknown = [name for name in args.demos if name != 'all' and name not in DEMOS]
    if unknown:
        parser.error(f"unknown demo: {', '.join(unknown)}")
    config = DemoConfig(size=args.size, seed=args.seed, fib_n=args.fib_n, verbose=args.verbose)

    logging.basicConfig(level=logging.DEBUG if config.verbose else logging.INFO,
                        format='%(asctime)s - %(message)s')
    logger.info(f"config: {asdict(config)}")

    if config.size < 0 or config.fib_n < 0:
        logger.error("size and fib-n must be non-negative")
        return 2

    names = list(DEMOS) if not args.demos or 'all' in args.demos else args.demos
    try:
        timings = run_demos(names, config)
    except UnderflowError as e:
        logger.error(f"demo failed: {e}")
        return 1

    logger.info(f"ran {len(timings)} demos in {sum(timings.values()):.2f}ms")
    return 0


if __name__ == '__main__':
    sys.exit(main())
