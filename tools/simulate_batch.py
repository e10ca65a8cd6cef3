# tools/simulate_batch.py

import argparse
import multiprocessing
from functools import partial

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from logger.logger import JSONLogger, new_run_entry
from simulator.errors import TuringMachineError
from simulator.turing_machine import TuringMachine
from tools.mirror_table import build_mirror_table, format_symbols, mirror_tape

console = Console()


class StepLimitExceeded(Exception):
    """The caller's step bound ran out before the machine halted."""

    def __init__(self, steps):
        self.steps = steps
        super().__init__(steps)

    def __str__(self):
        return f"Step limit reached after {self.steps} steps without halting"


# === Bounded Execution ===
def run_bounded(machine, max_steps=0):
    """run() with an outer step bound. 0 means no bound."""
    if max_steps < 0:
        raise ValueError(f"max_steps must be >= 0, got {max_steps}")
    if max_steps == 0:
        return machine.run()
    while not machine.halted:
        if machine.steps >= max_steps:
            raise StepLimitExceeded(machine.steps)
        machine.step()
    return machine.tape, machine.steps


# === Single Run ===
def simulate_input(text, max_steps=0):
    """Run one input through the mirror table and return a result entry."""
    entry = new_run_entry(text)
    try:
        tape = mirror_tape(text)
    except ValueError as e:
        entry["error"] = str(e)
        return entry

    machine = TuringMachine(build_mirror_table(), tape)
    try:
        tape, steps = run_bounded(machine, max_steps)
        entry["output"] = format_symbols(tape.contents())
        entry["halted"] = True
    except (TuringMachineError, StepLimitExceeded) as e:
        entry["error"] = str(e)
    entry["steps_taken"] = machine.steps
    return entry


# === Batch Runner ===
def simulate_batch(inputs, max_steps=0, cpu_cores=1, logger=None):
    """Run every input on its own machine. Results come back in input order."""
    inputs = list(inputs)
    worker = partial(simulate_input, max_steps=max_steps)
    results = []

    with Progress(
            SpinnerColumn(),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            TextColumn("{task.completed}/{task.total} Inputs"),
            TimeElapsedColumn(),
            console=console,
            transient=True,
    ) as progress:
        task = progress.add_task("[cyan]Simulating...", total=len(inputs))

        if cpu_cores > 1 and len(inputs) > 1:
            with multiprocessing.Pool(processes=cpu_cores) as pool:
                for entry in pool.imap(worker, inputs):
                    results.append(entry)
                    progress.update(task, advance=1)
        else:
            for text in inputs:
                results.append(worker(text))
                progress.update(task, advance=1)

    if logger is not None and results:
        logger.log_runs(results)

    return results


# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Run a batch of inputs through the mirror-swap machine.")
    parser.add_argument("inputs", nargs="+", help="Input strings over A, B and _ (empty)")
    parser.add_argument("--max_steps", type=int, default=0, help="Step bound per machine (0 = unbounded)")
    parser.add_argument("--cpu_cores", type=int, default=1, help="Number of worker processes")
    parser.add_argument("--output_directory", default="logs/", help="Where JSONL results are written")
    args = parser.parse_args()

    logger = JSONLogger(output_directory=args.output_directory)
    results = simulate_batch(args.inputs, args.max_steps, args.cpu_cores, logger)

    for entry in results:
        if entry["halted"]:
            console.print(f"[green]{entry['input'] or '(empty)'} -> {entry['output'] or '(empty)'} "
                          f"in {entry['steps_taken']} steps[/green]")
        else:
            console.print(f"[red]{entry['input'] or '(empty)'}: {entry['error']}[/red]")


if __name__ == "__main__":
    main()
