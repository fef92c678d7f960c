"""Headless console runner for the telemetry simulator."""

from __future__ import annotations

import argparse
import json
import sys
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from scadasim.core.logging import configure_logging
from scadasim.domain.models import SeriesName
from scadasim.evaluation.kpi import ProcessKpis
from scadasim.simulation import (
    EngineSnapshot,
    SimulatorConfig,
    TelemetrySimulator,
    kpis_to_jsonable,
    snapshot_to_jsonable,
)


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Final engine state after one runner execution."""

    snapshot: EngineSnapshot
    kpis: ProcessKpis


def build_parser() -> argparse.ArgumentParser:
    """Create CLI parser for a simulator run."""
    parser = argparse.ArgumentParser(
        prog="scadasim-run",
        description="Run the process telemetry simulator for a number of ticks and print its final state.",
    )
    parser.add_argument("--ticks", type=int, default=10, help="Number of ticks to simulate.")
    parser.add_argument("--interval-ms", type=int, default=2_000, help="Tick period in realtime mode.")
    parser.add_argument("--capacity", type=int, default=40, help="History points kept per series.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs.")
    parser.add_argument(
        "--setpoint",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Setpoint override applied before the first tick (repeatable).",
    )
    parser.add_argument(
        "--realtime",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Drive ticks from the background worker instead of stepping immediately.",
    )
    parser.add_argument("--format", choices=("text", "json"), default="text")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument(
        "--log-json",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Emit structured logs as JSON lines.",
    )
    return parser


def parse_setpoint_overrides(values: Sequence[str]) -> dict[str, str]:
    """Split repeated NAME=VALUE options; values are validated by the engine."""
    overrides: dict[str, str] = {}
    for item in values:
        name, separator, value = item.partition("=")
        if not separator or not name.strip():
            raise ValueError(f"setpoint override must look like NAME=VALUE: {item!r}")
        overrides[name.strip()] = value
    return overrides


def run_from_args(args: argparse.Namespace, *, stream: TextIO | None = None) -> RunSummary:
    """Build a simulator from CLI arguments and run it to completion."""
    if args.ticks <= 0:
        raise ValueError("ticks must be > 0")

    config = SimulatorConfig(interval_ms=args.interval_ms, history_capacity=args.capacity)
    simulator = TelemetrySimulator(config, seed=args.seed)

    overrides = parse_setpoint_overrides(args.setpoint)
    if overrides:
        simulator.apply_setpoints(overrides)

    if args.format == "text" and stream is not None:
        simulator.subscribe(lambda snapshot: stream.write(format_tick_line(snapshot) + "\n"))

    if args.realtime:
        finished = threading.Event()

        def _watch(snapshot: EngineSnapshot) -> None:
            # Runs on the worker thread; stopping here means no tick after the last requested one.
            if snapshot.tick >= args.ticks:
                simulator.stop()
                finished.set()

        simulator.subscribe(_watch)
        with simulator:
            finished.wait()
    else:
        for _ in range(args.ticks):
            simulator.tick()

    return RunSummary(snapshot=simulator.get_snapshot(), kpis=simulator.get_kpis())


def format_tick_line(snapshot: EngineSnapshot) -> str:
    readings = snapshot.readings
    latest = snapshot.series[SeriesName.TEMPERATURE]
    timestamp = latest[-1].timestamp if latest else "-"
    return (
        f"[{timestamp}] tick={snapshot.tick} "
        f"t_in={readings.inlet_temp:.2f} t_out={readings.outlet_temp:.2f} "
        f"flow={readings.flow:.2f} press={readings.pressure:.2f} level={readings.level:.2f} "
        f"alarms={len(snapshot.alarms)}"
    )


def render_summary(summary: RunSummary) -> str:
    snapshot = summary.snapshot
    kpis = summary.kpis
    lines = [
        f"ticks: {snapshot.tick}",
        f"delta_t: {kpis.delta_t:.2f}",
        f"efficiency: {kpis.efficiency_percent} %",
        f"cop: {kpis.cop:.2f}",
        f"pump: {'on' if snapshot.equipment.pump_on else 'off'}",
        f"fan: {'on' if snapshot.equipment.fan_on else 'off'}",
        f"alarms: {len(snapshot.alarms)}",
    ]
    for alarm in snapshot.alarms:
        lines.append(f"  [{alarm.timestamp}] {alarm.kind.label}: {alarm.value:.2f}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, json_output=args.log_json)
    try:
        summary = run_from_args(args, stream=sys.stdout)
    except Exception as exc:
        print(f"[ERROR] simulator run failed: {exc}", file=sys.stderr)
        return 2

    if args.format == "json":
        payload = {
            "snapshot": snapshot_to_jsonable(summary.snapshot),
            "kpis": kpis_to_jsonable(summary.kpis),
        }
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        print(render_summary(summary))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
