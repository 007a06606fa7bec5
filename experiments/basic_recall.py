"""
Basic recall experiment for the Hopfield network.

Trains a network on a few hand-drawn glyphs, corrupts each one with random
bit flips and recalls it, demonstrating:
- Stored patterns as fixed points of the synchronous update
- Error correction from noisy inputs
- Energy decrease along the recall trajectory

Settings are read from a .env file at the repository root and may be
overridden on the command line.
"""

import os
import time
from pathlib import Path

import numpy as np
from dotenv import load_dotenv

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from hopmem import HopfieldNetwork
from hopmem.generators import corrupt_pattern, pattern_from_grid
from hopmem.utils import compute_recall_metrics, estimate_capacity

load_dotenv(Path(__file__).parent.parent / '.env')

GLYPHS = {
    'T': [
        "#####",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
    ],
    'L': [
        "#....",
        "#....",
        "#....",
        "#....",
        "#####",
    ],
    'O': [
        ".###.",
        "#...#",
        "#...#",
        "#...#",
        ".###.",
    ],
}


def glyph_grid(rows, height: int, width: int):
    """Crop or pad an ASCII glyph to a height x width painted-cell grid."""
    grid = []
    for i in range(height):
        line = rows[i] if i < len(rows) else ""
        grid.append([j < len(line) and line[j] == '#' for j in range(width)])
    return grid


def run_basic_recall(height: int = 5, width: int = 5, noise_flips: int = 2,
                     max_iterations: int = 100, random_seed: int = 42,
                     verbose: bool = True):
    """
    Run basic recall experiment.

    Args:
        height: Grid rows
        width: Grid columns
        noise_flips: Bits flipped in each probe
        max_iterations: Recall iteration cap
        random_seed: Random seed for reproducibility
        verbose: Whether to print progress

    Returns:
        dict: Per-glyph recall metrics and timing
    """
    neurons = height * width

    if verbose:
        print("=" * 70)
        print("HOPFIELD NETWORK - Basic Recall")
        print("=" * 70)
        print(f"  Grid: {height}x{width} ({neurons} neurons)")
        print(f"  Glyphs: {', '.join(GLYPHS)}")
        print(f"  Noise flips per probe: {noise_flips}")
        print(f"  Estimated capacity: {estimate_capacity(neurons)} pattern(s)")
        print("=" * 70)

    start_time = time.time()

    network = HopfieldNetwork(neurons, max_iterations=max_iterations)
    patterns = {}
    for name, rows in GLYPHS.items():
        patterns[name] = pattern_from_grid(glyph_grid(rows, height, width))
        network.train(patterns[name])

    if verbose:
        print(f"\n[1/2] Trained {network}")
        print(f"\n[2/2] Recalling corrupted glyphs...")

    rng = np.random.RandomState(random_seed)

    results = {}
    probes = {}
    for name, pattern in patterns.items():
        noisy = corrupt_pattern(pattern, noise_flips, rng=rng)
        probes[name] = noisy
        metrics = compute_recall_metrics(network, noisy, pattern)
        results[name] = metrics

        if verbose:
            status = "converged" if metrics['converged'] else "capped"
            print(f"  {name}: hamming {metrics['hamming_before']} -> "
                  f"{metrics['hamming_after']}, "
                  f"E {metrics['energy_initial']:.3f} -> {metrics['energy_final']:.3f}, "
                  f"{metrics['iterations']} it ({status})")

    total_time = time.time() - start_time

    if verbose:
        recovered = sum(1 for m in results.values() if m['hamming_after'] == 0)
        print("\n" + "=" * 70)
        print(f"Recovered {recovered}/{len(results)} glyphs in {total_time:.3f}s")
        print("=" * 70)

    return {
        'config': {
            'height': height,
            'width': width,
            'noise_flips': noise_flips,
            'max_iterations': max_iterations,
            'random_seed': random_seed
        },
        'timing': total_time,
        'recall': results,
        'probes': probes,
        'patterns': patterns,
        'network': network
    }


def main():
    """Main entry point for basic recall."""
    import argparse

    parser = argparse.ArgumentParser(
        description='Run Hopfield network basic recall experiment'
    )
    parser.add_argument('--height', type=int,
                        default=int(os.getenv('HOPMEM_GRID_HEIGHT', '5')),
                        help='Grid rows (default: 5)')
    parser.add_argument('--width', type=int,
                        default=int(os.getenv('HOPMEM_GRID_WIDTH', '5')),
                        help='Grid columns (default: 5)')
    parser.add_argument('--noise', type=int,
                        default=int(os.getenv('HOPMEM_NOISE_FLIPS', '2')),
                        help='Bits flipped per probe (default: 2)')
    parser.add_argument('--max-iterations', type=int,
                        default=int(os.getenv('HOPMEM_MAX_ITERATIONS', '100')),
                        help='Recall iteration cap (default: 100)')
    parser.add_argument('--seed', type=int,
                        default=int(os.getenv('HOPMEM_RANDOM_SEED', '42')),
                        help='Random seed (default: 42)')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save a recall figure for the first glyph to this path')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Suppress output')

    args = parser.parse_args()

    results = run_basic_recall(
        height=args.height,
        width=args.width,
        noise_flips=args.noise,
        max_iterations=args.max_iterations,
        random_seed=args.seed,
        verbose=not args.quiet
    )

    if args.plot:
        sys.path.insert(0, str(Path(__file__).parent.parent))
        from visualization import plot_recall

        name = next(iter(results['probes']))
        noisy = results['probes'][name]
        plot_recall(noisy, results['network'].recall(noisy), args.height, args.width,
                    target=results['patterns'][name], save_path=args.plot)

    return results


if __name__ == '__main__':
    main()
