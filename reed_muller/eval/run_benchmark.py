"""Measure RM(1, m) decoding efficiency over a binary symmetric channel."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from .. import config as global_config
from ..algebra import Vector
from ..channel import BinarySymmetricChannel
from ..rm import ReedMullerDecoder, ReedMullerEncoder
from ..utils.seeding import seed_all


@dataclass
class ExperimentStats:
    trials: int = 0
    bit_errors: int = 0
    frame_errors: int = 0
    efficiency_sum: float = 0.0

    def update(self, errors: int, message_len: int) -> None:
        self.trials += 1
        self.bit_errors += errors
        self.efficiency_sum += 1.0 - errors / message_len
        if errors:
            self.frame_errors += 1

    def row(self) -> Dict[str, float]:
        if self.trials == 0:
            return {"efficiency": float("nan"), "avg_errors": float("nan"), "frame_error_rate": float("nan")}
        return {
            "efficiency": round(self.efficiency_sum / self.trials, 3),
            "avg_errors": round(self.bit_errors / self.trials, 3),
            "frame_error_rate": self.frame_errors / self.trials,
        }


def correction_radius(m: int) -> int:
    """Number of bit errors per codeword that RM(1, m) always corrects."""

    return ((1 << (m - 1)) - 1) // 2


def count_errors(expected: Vector, actual: Vector) -> int:
    return int(np.count_nonzero(expected.to_array() != actual.to_array()))


def run_experiment(
    m: int,
    error_probability: float,
    experiments: int,
    rng: np.random.Generator,
) -> Dict[str, float]:
    encoder = ReedMullerEncoder(m)
    decoder = ReedMullerDecoder(m)
    channel = BinarySymmetricChannel(error_probability, rng=rng)

    message = Vector(rng.integers(0, 2, size=encoder.required_message_length))
    codeword = encoder.encode(message)

    stats = ExperimentStats()
    for _ in range(experiments):
        received = channel.pass_through(codeword)
        decoded = decoder.decode(received)
        stats.update(count_errors(message, decoded), len(message))

    row: Dict[str, float] = {
        "m": m,
        "codeword_length": encoder.codeword_length,
        "correctable": correction_radius(m),
        "error_probability": error_probability,
        "experiments": experiments,
    }
    row.update(stats.row())
    return row


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    defaults = global_config.get_config()
    parser = argparse.ArgumentParser(description="RM(1, m) decoding efficiency sweep")
    parser.add_argument("--p", type=float, default=defaults.error_probability, help="Bit flip probability")
    parser.add_argument("--experiments", type=int, default=defaults.experiments, help="Trials per m")
    parser.add_argument("--m_lo", type=int, default=defaults.m_lo)
    parser.add_argument("--m_hi", type=int, default=defaults.m_hi)
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--out", type=str, required=True, help="CSV output path")
    parser.add_argument("--plot", type=str, help="Optional plot path")
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.m_lo < 2:
        raise ValueError("--m_lo must be at least 2")
    if args.m_hi < args.m_lo:
        raise ValueError("--m_hi must not be below --m_lo")
    if args.experiments <= 0:
        raise ValueError("--experiments must be positive")
    return args


def run(args: argparse.Namespace) -> List[Dict[str, float]]:
    seed_all(args.seed)
    rng = np.random.default_rng(args.seed)

    rows: List[Dict[str, float]] = []
    for m in range(args.m_lo, args.m_hi + 1):
        row = run_experiment(m, args.p, args.experiments, rng)
        print(
            f"m = {m}, efficiency = {row['efficiency']}, "
            f"average error count = {row['avg_errors']}, FER = {row['frame_error_rate']:.3e}"
        )
        rows.append(row)
    return rows


def write_csv(rows: List[Dict[str, float]], path: Path) -> None:
    if not rows:
        return
    header = [
        "m",
        "codeword_length",
        "correctable",
        "error_probability",
        "experiments",
        "efficiency",
        "avg_errors",
        "frame_error_rate",
    ]
    with path.open("w") as f:
        f.write(",".join(header) + "\n")
        for row in rows:
            f.write(",".join(str(row[col]) for col in header) + "\n")


def plot_rows(rows: List[Dict[str, float]], path: Path) -> None:
    if not rows:
        return
    ms = [r["m"] for r in rows]
    plt.figure(figsize=(6, 4))
    plt.plot(ms, [r["efficiency"] for r in rows], "o-", label="Efficiency")
    plt.plot(ms, [r["frame_error_rate"] for r in rows], "s-", label="FER")
    plt.xlabel("m")
    plt.ylabel("Rate")
    plt.title(f"RM(1, m), p = {rows[0]['error_probability']}")
    plt.grid(True, ls="--", alpha=0.4)
    plt.legend()
    plt.tight_layout()
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(path, dpi=200)
    plt.close()


def main(argv: Optional[Iterable[str]] = None) -> None:
    args = parse_args(argv)
    rows = run(args)
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    write_csv(rows, out_path)
    print(f"Saved benchmark table to {out_path}")
    if args.plot:
        plot_rows(rows, Path(args.plot))
        print(f"Saved benchmark plot to {args.plot}")


if __name__ == "__main__":
    main()
