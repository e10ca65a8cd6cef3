# app.py

import argparse
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt, IntPrompt, Confirm

from config.config_loader import load_config, save_config, validate_config
from logger.logger import JSONLogger, new_run_entry
from simulator.errors import TuringMachineError
from simulator.turing_machine import TuringMachine
from tools.mirror_table import MirrorSymbol, build_mirror_table, format_symbols, mirror_tape
from tools.simulate_batch import StepLimitExceeded, run_bounded, simulate_batch
from tools.table_inspect import print_table

console = Console()

CONFIG_PATH = Path("config/runtime_config.json")


# === Utilities ===
def load_runtime_config(path=None):
    """Load the given config file, or the default one if it exists. A named file must exist."""
    if path is None:
        if not CONFIG_PATH.exists():
            return load_config(None)
        path = CONFIG_PATH
    return load_config(str(path))


def make_logger(config):
    if not config["log_results"]:
        return None
    return JSONLogger(output_directory=config["output_directory"], log_file_prefix=config["log_file_prefix"])


def show_main_menu():
    console.print("\n[bold cyan]Turing Machine Simulator[/bold cyan]")
    console.print("[1] Run Input")
    console.print("[2] Inspect Transition Table")
    console.print("[3] Edit Config")
    console.print("[4] Exit")


def run_single(text, config, logger=None):
    """Run one input step by step, optionally drawing the tape after each step."""
    try:
        machine = TuringMachine(build_mirror_table(), mirror_tape(text))
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return None

    entry = new_run_entry(text)
    try:
        if config["visualize"]:
            machine.visualize(config["visualize_window"], console=console)
            while not machine.halted:
                if config["max_steps"] and machine.steps >= config["max_steps"]:
                    raise StepLimitExceeded(machine.steps)
                machine.step()
                machine.visualize(config["visualize_window"], console=console)
            tape, steps = machine.tape, machine.steps
        else:
            tape, steps = run_bounded(machine, config["max_steps"])
        entry["output"] = format_symbols(tape.contents())
        entry["halted"] = True
        console.print(f"[green]Halted after {steps} steps. Output: {entry['output'] or '(empty)'}[/green]")
    except (TuringMachineError, StepLimitExceeded) as e:
        entry["error"] = str(e)
        console.print(f"[red]{e}[/red]")
    entry["steps_taken"] = machine.steps

    if logger is not None:
        logger.log_run(entry)
    return entry


def handle_run(config):
    console.print("\n[bold]Run Input[/bold]")
    text = Prompt.ask("Input (A, B and _ for empty)", default="ABBA")
    run_single(text, config, make_logger(config))


def handle_inspect():
    console.print()
    print_table(build_mirror_table(), MirrorSymbol, console=console)


def handle_edit_config(config, path=CONFIG_PATH):
    console.print("\n[bold]Edit Configuration[/bold]")

    max_steps = IntPrompt.ask("Max Steps (0 = unbounded)", default=config["max_steps"])
    visualize = Confirm.ask("Visualize each step?", default=config["visualize"])
    window = IntPrompt.ask("Visualize Window", default=config["visualize_window"])
    cpu_cores = IntPrompt.ask("Number of CPU Cores", default=config["cpu_cores"])
    log_results = Confirm.ask("Log results?", default=config["log_results"])

    config.update({
        "max_steps": max_steps,
        "visualize": visualize,
        "visualize_window": window,
        "cpu_cores": cpu_cores,
        "log_results": log_results,
    })

    try:
        save_config(config, str(path))
    except (TypeError, ValueError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        return
    console.print("[green]Configuration updated successfully.[/green]")


def interactive_main(config, path=None):
    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3", "4"], default="4")

        if choice == "1":
            handle_run(config)
        elif choice == "2":
            handle_inspect()
        elif choice == "3":
            handle_edit_config(config, path or CONFIG_PATH)
            config = load_runtime_config(path)
        elif choice == "4":
            console.print("[bold green]Goodbye![/bold green]")
            break


# === CLI Mode for Automation ===
def cli_main(args, config):
    if args.inspect:
        handle_inspect()

    if not args.input:
        return

    logger = make_logger(config)
    if len(args.input) > 1 and config["cpu_cores"] > 1 and not config["visualize"]:
        results = simulate_batch(args.input, config["max_steps"], config["cpu_cores"], logger)
        for entry in results:
            label = entry["input"] or "(empty)"
            if entry["halted"]:
                console.print(f"[green]{label} -> {entry['output'] or '(empty)'} in {entry['steps_taken']} steps[/green]")
            else:
                console.print(f"[red]{label}: {entry['error']}[/red]")
    else:
        for text in args.input:
            console.print(f"[cyan]Running {text or '(empty)'}...[/cyan]")
            run_single(text, config, logger)


def build_parser():
    parser = argparse.ArgumentParser(description="Deterministic single-tape Turing machine simulator")
    parser.add_argument("-i", "--input", action="append", help="Input string over A, B and _ (repeatable)")
    parser.add_argument("--config", help=f"Path to runtime config JSON (default: {CONFIG_PATH} if present)")
    parser.add_argument("--max-steps", type=int, help="Stop a run after this many steps (0 = unbounded)")
    parser.add_argument("--cpu-cores", type=int, help="Worker processes for several inputs")
    parser.add_argument("--visualize", action="store_true", help="Draw the tape after every step")
    parser.add_argument("--inspect", action="store_true", help="Print the transition table")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_runtime_config(args.config)

        if args.max_steps is not None:
            config["max_steps"] = args.max_steps
        if args.cpu_cores is not None:
            config["cpu_cores"] = args.cpu_cores
        if args.visualize:
            config["visualize"] = True
        validate_config(config)
    except (OSError, TypeError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)

    if args.input or args.inspect:
        cli_main(args, config)
    else:
        interactive_main(config, args.config)


if __name__ == "__main__":
    main()
