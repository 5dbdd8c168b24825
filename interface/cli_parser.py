"""CLI parser construction for the stask CLI/TUI."""

import argparse
from typing import Any, Mapping


def build_parser(commands: Any, themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stask",
        description="stask: one directory per task, one task.txt per directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--root", dest="root", help="task root directory (default: $STASK_ROOT, config, cwd)")
    parser.add_argument("--theme", choices=list(themes.keys()), default=default_theme, help="TUI palette")
    parser.add_argument("--log-file", dest="log_file", help="write debug logs to this file")
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    def add_id_arg(sp):
        sp.add_argument("task_id", help="task id (directory name)")
        return sp

    sub = parser.add_subparsers(dest="command", help="Commands")

    tui_p = sub.add_parser("tui", help="Run the full-screen list (default)")
    tui_p.set_defaults(func=commands.cmd_tui)

    lp = sub.add_parser("list", help="Print tasks in display order")
    lp.set_defaults(func=commands.cmd_list)

    np = sub.add_parser("new", help="Create a task and open it in the editor")
    np.add_argument("--no-edit", action="store_true", help="only create the file and print its path")
    np.set_defaults(func=commands.cmd_new)

    sp = add_id_arg(sub.add_parser("show", help="Print a task file"))
    sp.set_defaults(func=commands.cmd_show)

    dp = add_id_arg(sub.add_parser("done", help="Toggle done/todo"))
    dp.set_defaults(func=commands.cmd_done)

    pp = add_id_arg(sub.add_parser("pending", help="Toggle pending/todo"))
    pp.set_defaults(func=commands.cmd_pending)

    rp = add_id_arg(sub.add_parser("rm", help="Delete a task directory"))
    rp.set_defaults(func=commands.cmd_rm)

    return parser


__all__ = ["build_parser"]
