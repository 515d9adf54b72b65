# tools/simulate_words.py

import argparse
import json
import os
from collections import Counter
from pathlib import Path

from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from simulator.evaluator import evaluate_words
from tools.machine_parser import load_machine_description, build_machine

# === Utility Loaders ===
def load_word_list(words_file):
    """
    One word per line; blank lines are skipped, surrounding whitespace stripped.
    A line holding only the machine's blank symbol stands for the empty word.
    """
    with open(words_file, "r", encoding="utf-8") as f:
        words = [line.strip() for line in f if line.strip()]
    return words

def console_message(msg):
    print(f"[{Path(os.getcwd()).name}] {msg}")

# === Main Simulation Runner ===
def simulate_words(machine_file, words_file, output_file, max_steps=10_000):
    description = load_machine_description(machine_file)
    machine = build_machine(description)
    words = load_word_list(words_file)
    console_message(f"Loaded {len(words):,} words for machine {Path(machine_file).name}.")

    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    verdicts = Counter()
    words = ["" if word == description.blank else word for word in words]
    internal_words = [description.internal_word(word) for word in words]

    with open(output_file, "a", encoding="utf-8") as results_fh, Progress(
            SpinnerColumn(),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            TextColumn("{task.completed}/{task.total} Words"),
            TimeElapsedColumn()
    ) as progress:

        task = progress.add_task("[cyan]Simulating...", total=len(words))

        for word, (_, result) in zip(words, evaluate_words(machine, internal_words, max_steps)):
            entry = result.to_entry(description.blank)
            entry["word"] = word
            results_fh.write(json.dumps(entry) + "\n")
            verdicts[result.verdict] += 1
            progress.update(task, advance=1)

    for verdict_name in ("accept", "reject", "undecided"):
        console_message(f"[INFO] {verdict_name}: {verdicts[verdict_name]:,}")
    console_message(f"[SUCCESS] All words simulated. Results saved to {output_file}")
    return verdicts


# === CLI ===
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a Turing machine on every word of a word list.")
    parser.add_argument("machine_file", help="Path to the machine description file")
    parser.add_argument("words_file", help="Path to the word list (one word per line)")
    parser.add_argument("--output", default="results/results.jsonl", help="Output JSONL file (default: results/results.jsonl)")
    parser.add_argument("--max_steps", "--max-steps", type=int, default=10_000, help="Step budget per word, 0 for none")
    args = parser.parse_args(argv)

    simulate_words(
        args.machine_file,
        args.words_file,
        args.output,
        max_steps=args.max_steps
    )

if __name__ == "__main__":
    main()
