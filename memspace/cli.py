"""
Command-line interface for the memspace library.

This module provides CLI commands for replaying allocation scripts against
a memory space and for benchmarking random allocation workloads.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, Iterable, List, Optional, Tuple

import numpy as np

from .core.space import ALLOCATION_FAILED, MemorySpace
from .exceptions import InvalidRequest
from .factory import DEFAULT_MAX_SIZE, create_space_from_config
from .profiling.profiler import OperationProfiler
from .types.descriptors import SpaceConfig
from .types.enums import OperationKind

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def _emit(payload: Dict[str, Any], output: Optional[str]) -> None:
    if output:
        with open(output, 'w') as f:
            json.dump(payload, f, indent=2)
    else:
        print(json.dumps(payload, indent=2))


def parse_request(line: str) -> Optional[Tuple[OperationKind, Optional[int]]]:
    """Parse one script line; blank lines and comments yield None."""
    text = line.split('#', 1)[0].strip()
    if not text:
        return None

    parts = text.split()
    try:
        kind = OperationKind.from_command(parts[0])
    except KeyError:
        raise InvalidRequest(f"Unknown command: {parts[0]!r}", line=line) from None

    needs_argument = kind in (OperationKind.ALLOCATE, OperationKind.RELEASE)
    if len(parts) != (2 if needs_argument else 1):
        raise InvalidRequest(f"Wrong number of arguments: {text!r}", line=line)

    if not needs_argument:
        return kind, None

    try:
        return kind, int(parts[1])
    except ValueError:
        raise InvalidRequest(f"Expected an integer argument: {text!r}", line=line) from None


def run_script(space: MemorySpace, lines: Iterable[str]) -> List[Dict[str, Any]]:
    """Apply each request in ``lines`` to ``space`` and record the outcome."""
    steps = []
    for line in lines:
        request = parse_request(line)
        if request is None:
            continue

        kind, argument = request
        step: Dict[str, Any] = {'operation': kind.name.lower(), 'argument': argument}

        if kind is OperationKind.ALLOCATE:
            step['address'] = space.allocate(argument)
        elif kind is OperationKind.RELEASE:
            step['was_allocated'] = space.is_allocated(argument)
            space.release(argument)
        elif kind is OperationKind.DEFRAGMENT:
            step['merges'] = space.defragment()
        else:
            step['dump'] = str(space)

        steps.append(step)
    return steps


def simulate_command(argv: Optional[List[str]] = None) -> int:
    """CLI command for replaying an allocation script."""
    parser = argparse.ArgumentParser(description='Replay allocation requests against a memory space')
    parser.add_argument('script', nargs='?', type=str,
                       help='Request script, one request per line (default: stdin)')
    parser.add_argument('--max-size', type=int, default=DEFAULT_MAX_SIZE,
                       help='Size of the managed address range')
    parser.add_argument('--name', type=str, default=SpaceConfig().name,
                       help='Label reported with the results')
    parser.add_argument('--output', type=str, help='Output file for results')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = SpaceConfig(max_size=args.max_size, name=args.name)
        space = create_space_from_config(config)
        if args.script:
            with open(args.script) as f:
                steps = run_script(space, f)
        else:
            steps = run_script(space, sys.stdin)
    except (InvalidRequest, ValueError, OSError) as e:
        print(f"memspace-sim: {e}", file=sys.stderr)
        return 2

    _emit({
        'config': {'name': config.name, 'max_size': config.max_size},
        'steps': steps,
        'free': [block.as_tuple() for block in space.free_blocks()],
        'allocated': [block.as_tuple() for block in space.allocated_blocks()],
        'metrics': space.fragmentation().as_dict(),
    }, args.output)
    return 0


def run_benchmark(
    max_size: int,
    operations: int,
    seed: int,
    max_request: int,
    release_probability: float
) -> Dict[str, Any]:
    """Run a random allocate/release workload and report its behaviour."""
    rng = np.random.default_rng(seed)
    space = MemorySpace(max_size)
    profiler = OperationProfiler()
    live: List[int] = []

    for _ in range(operations):
        if live and rng.random() < release_probability:
            address = live.pop(int(rng.integers(len(live))))
            with profiler.profile('release'):
                space.release(address)
            continue

        length = int(rng.integers(1, max_request + 1))
        with profiler.profile('allocate'):
            address = space.allocate(length)
        if address == ALLOCATION_FAILED:
            profiler.count('allocation_failures')
        else:
            live.append(address)

    before = space.fragmentation()
    with profiler.profile('defragment'):
        merges = space.defragment()
    space.check_invariants()

    logger.info(f"Benchmark finished: {len(live)} live blocks, {merges} merges")

    return {
        'config': {
            'max_size': max_size,
            'operations': operations,
            'seed': seed,
            'max_request': max_request,
            'release_probability': release_probability,
        },
        'results': {
            'profile': profiler.summary(),
            'merges': merges,
            'before_defragment': before.as_dict(),
            'after_defragment': space.fragmentation().as_dict(),
        }
    }


def benchmark_command(argv: Optional[List[str]] = None) -> int:
    """CLI command for benchmarking a random workload."""
    parser = argparse.ArgumentParser(description='Benchmark memspace allocation')
    parser.add_argument('--max-size', type=int, default=4096,
                       help='Size of the managed address range')
    parser.add_argument('--operations', type=int, default=1000,
                       help='Number of allocate/release requests')
    parser.add_argument('--max-request', type=int, default=64,
                       help='Largest single allocation request')
    parser.add_argument('--release-probability', type=float, default=0.4,
                       help='Chance that a request releases a live block')
    parser.add_argument('--seed', type=int, default=0, help='Random seed')
    parser.add_argument('--output', type=str, help='Output file for results')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.max_size <= 0 or args.max_request <= 0 or args.operations < 0:
        parser.error('--max-size and --max-request must be positive, --operations non-negative')

    results = run_benchmark(
        args.max_size,
        args.operations,
        args.seed,
        args.max_request,
        args.release_probability
    )
    _emit(results, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(simulate_command())
