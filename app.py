# app.py

import argparse
import sys
import time
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from config.config_loader import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH, load_config, validate_config
from logger.logger import JSONLogger
from simulator.evaluator import RunResult, UNDECIDED, bounded_run, verdict
from simulator.tape import BLANK
from tools.machine_parser import (
    build_machine,
    load_input_word,
    load_machine_description,
)

console = Console()

VERDICT_STYLES = {
    "accept": "bold green",
    "reject": "bold red",
    "undecided": "bold yellow"
}

# === Utilities ===
def load_runtime_config(path):
    try:
        return load_config(path)
    except FileNotFoundError:
        if path != DEFAULT_CONFIG_PATH:
            raise
    # No runtime config under the working directory: fall back to defaults.
    return DEFAULT_CONFIG.copy()

def apply_overrides(config, args):
    config = dict(config)
    if args.auto:
        config["auto"] = True
    if args.delay is not None:
        config["delay"] = args.delay
    if args.max_steps is not None:
        config["max_steps"] = args.max_steps
    if args.no_log:
        config["log_runs"] = False
    return config

def format_tape(snapshot, blank, highlight=True):
    """Logical tape content joined by spaces, head cell highlighted."""
    tape = snapshot.tape
    offset = tape.logical_head_offset()
    cells = []
    for index, cell in enumerate(tape.logical_content()):
        symbol = escape(blank if cell == BLANK else cell)
        if highlight and index == offset:
            symbol = f"[reverse]{symbol}[/reverse]"
        cells.append(symbol)
    return " ".join(cells)

def show_snapshot(snapshot, blank):
    console.print(f"State: {escape(snapshot.state)}")
    console.print(format_tape(snapshot, blank))

def solicit_word():
    return Prompt.ask("Enter input word", default="", show_default=False, console=console)


# === Simulation ===
def simulate_machine(machine, word, blank, auto=False, delay=0.5, max_steps=None, keep_history=False):
    """
    Pace and print every snapshot of a run.

    Returns the RunResult and, with keep_history, every snapshot shown.
    """
    history = []
    final = None
    count = 0
    try:
        for snapshot in bounded_run(machine, word, max_steps):
            if not auto:
                console.input("Press Enter to continue:")
            if delay > 0:
                time.sleep(delay)
            show_snapshot(snapshot, blank)
            final = snapshot
            count += 1
            if keep_history:
                history.append(snapshot)
    except KeyboardInterrupt:
        console.print("\n[yellow]Simulation interrupted.[/yellow]")
        if final is None:
            final = machine.initial_snapshot(word)
            count = 1
        return RunResult(word, UNDECIDED, count - 1, final), history

    return RunResult(word, verdict(machine, final), count - 1, final), history

def report_result(result, max_steps):
    style = VERDICT_STYLES[result.verdict]
    if result.verdict == UNDECIDED and max_steps and result.steps >= max_steps:
        console.print(f"[{style}]No halt within {max_steps:,} steps.[/{style}]")
    else:
        console.print(f"[{style}]Verdict: {result.verdict}[/{style}] after {result.steps:,} steps")

def log_run(config, machine_file, result, history, blank):
    logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
    run_id = f"{Path(machine_file).stem}-{datetime.now().strftime('%Y%m%dT%H%M%S%f')}"

    entry = result.to_entry(blank)
    entry["word"] = entry["word"].replace(BLANK, blank)
    entry.update({
        "run_id": run_id,
        "machine": str(machine_file),
        "timestamp": datetime.now().isoformat()
    })
    logger.log_summary([entry])
    if result.verdict == "accept":
        logger.log_accepted([entry])
    elif result.verdict == "reject":
        logger.log_rejected([entry])

    if config["log_snapshots"] and history:
        logger.log_snapshots(run_id, history, blank)

def run_simulator(argv=None):
    parser = argparse.ArgumentParser(description="Turing Machine Simulator")
    parser.add_argument("machine_file", help="Path to the machine description file")
    parser.add_argument("input_file", nargs="?", help="Path to the input word file")
    parser.add_argument("--auto", action="store_true", help="Run in automatic mode")
    parser.add_argument("--delay", type=float, help="Delay between steps in seconds (default: 0.5)")
    parser.add_argument("--max-steps", type=int, help="Stop after this many steps, 0 for no limit")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to the runtime config")
    parser.add_argument("--no-log", action="store_true", help="Do not write run logs")
    args = parser.parse_args(argv)

    try:
        config = apply_overrides(load_runtime_config(args.config), args)
        validate_config(config)
        description = load_machine_description(args.machine_file)
        machine = build_machine(description)
        word = load_input_word(args.input_file) if args.input_file else None
    except (FileNotFoundError, ValueError, TypeError) as error:
        console.print(f"[red]Error: {escape(str(error))}[/red]")
        sys.exit(1)

    if word is None:
        word = solicit_word()

    result, history = simulate_machine(
        machine,
        description.internal_word(word),
        description.blank,
        auto=config["auto"],
        delay=config["delay"],
        max_steps=config["max_steps"],
        keep_history=config["log_runs"] and config["log_snapshots"]
    )
    report_result(result, config["max_steps"])

    if config["log_runs"]:
        log_run(config, args.machine_file, result, history, description.blank)

    return result

def main(argv=None):
    run_simulator(argv)

if __name__ == "__main__":
    main()
