import argparse

from rich.console import Console
from rich.table import Table

from tools.machine_parser import load_machine_description, build_machine

console = Console()


def collect_alphabet(description):
    """Display symbols that appear anywhere in the transition table, blank last."""
    symbols = set()
    for transition in description.transitions:
        symbols.add(description.to_display(transition.symbol))
        symbols.add(description.to_display(transition.new_symbol))
    symbols.discard(description.blank)
    return sorted(symbols) + [description.blank]


def collect_states(machine):
    """Start state first, then the others in table order, halting states last."""
    ordered = [machine.start]
    for transition in machine.transitions:
        for state in (transition.state, transition.new_state):
            if state not in ordered and not machine.is_halting(state):
                ordered.append(state)
    for state in (machine.accept, machine.reject):
        if state not in ordered:
            ordered.append(state)
    return ordered


def transition_rows(description, machine):
    """One row per state: [state, action per symbol]."""
    alphabet = collect_alphabet(description)
    rows = []
    for state in collect_states(machine):
        row = [state]
        for symbol in alphabet:
            if machine.is_halting(state):
                row.append("HALT")
                continue
            internal = description.internal_word(symbol)
            transition = machine.lookup(state, internal)
            if transition is None:
                row.append("REJECT")
            else:
                new_symbol = description.to_display(transition.new_symbol)
                row.append(f"{new_symbol} {transition.move.value} {transition.new_state}")
        rows.append(row)
    return alphabet, rows


def print_transition_table(description, machine):
    alphabet, rows = transition_rows(description, machine)

    table = Table(title="Transition Table", show_header=True, header_style="bold magenta")
    table.add_column("State", justify="center")
    for symbol in alphabet:
        table.add_column(symbol, justify="center")
    for row in rows:
        table.add_row(*row)
    console.print(table)


LATEX_SPECIALS = {"\\": r"\textbackslash{}", "_": r"\_", "#": r"\#", "&": r"\&", "%": r"\%", "$": r"\$",
                  "{": r"\{", "}": r"\}", "^": r"\textasciicircum{}", "~": r"\textasciitilde{}"}


def latex_escape(text):
    return "".join(LATEX_SPECIALS.get(char, char) for char in text)


def print_latex_table(description, machine):
    alphabet, rows = transition_rows(description, machine)

    print("\n=== LaTeX Table ===")
    print(r"\begin{array}{c|" + "c" * len(alphabet) + "}")
    print("State/Symbol & " + " & ".join([f"\\text{{{latex_escape(s)}}}" for s in alphabet]) + r" \\ \hline")
    for row in rows:
        print(" & ".join(f"\\text{{{latex_escape(cell)}}}" for cell in row) + r" \\")
    print(r"\end{array}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing Machine Description Inspector")
    parser.add_argument("machine_file", help="Path to the machine description file")
    parser.add_argument("--latex", action="store_true", help="Also print the table as a LaTeX array")
    args = parser.parse_args(argv)

    description = load_machine_description(args.machine_file)
    machine = build_machine(description)

    print(f"[INFO] Machine {args.machine_file}")
    print(f"  Start: {machine.start}")
    print(f"  Accept: {machine.accept}")
    print(f"  Reject: {machine.reject}")
    print(f"  Blank: {description.blank}")
    print(f"  States: {len(machine.states)}")
    print(f"  Transitions: {len(machine.transitions)}")

    print_transition_table(description, machine)
    if args.latex:
        print_latex_table(description, machine)

if __name__ == "__main__":
    main()
