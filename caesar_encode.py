#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Шифровальщик текста шифром Цезаря (латиница)"""

import os
import sys
import logging
import argparse
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from caesar import transform

log = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# ЛОГИРОВАНИЕ
# ═══════════════════════════════════════════════════════════════════════════════

def setup_logging(verbose: bool = False) -> None:
    """WARNING по умолчанию, DEBUG с --verbose, CAESAR_LOG_LEVEL важнее обоих"""
    level_name = os.environ.get('CAESAR_LOG_LEVEL', 'DEBUG' if verbose else 'WARNING').upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


# ═══════════════════════════════════════════════════════════════════════════════
# UI
# ═══════════════════════════════════════════════════════════════════════════════

class UI:
    def __init__(self):
        self.c = Console()
        self.err = Console(stderr=True)

    def header(self):
        self.c.print(Panel(
            "[bold cyan]CAESAR ENCODER[/bold cyan]\n"
            "[dim]Латиница a-z • регистр сохраняется • остальное как есть[/dim]",
            border_style="cyan", box=box.DOUBLE
        ))
        self.c.print()

    def result(self, key: int, decode: bool, text: str, result: str):
        tbl = Table(box=box.SIMPLE, show_header=False)
        tbl.add_column("", style="bold", width=14)
        tbl.add_column("")
        tbl.add_row("Ключ", f"[yellow]{key}[/yellow]")
        tbl.add_row("Режим", "расшифровка" if decode else "шифрование")
        tbl.add_row("Исходный", Text(text))
        self.c.print(tbl)

        title = "РАСШИФРОВАННЫЙ" if decode else "ЗАШИФРОВАННЫЙ"
        self.c.print(f"[bold green]💬 {title} ТЕКСТ:[/bold green]")
        self.c.print(result, markup=False, highlight=False)

    def error(self, message: str):
        self.err.print(f"[bold red]❌ {message}[/bold red]")

    def ask_multiline(self, prompt: str) -> str:
        """Многострочный ввод: пустая строка или Ctrl+D завершает"""
        self.c.print(f"[bold yellow]{prompt}[/bold yellow]")
        self.c.print("[dim](пустая строка = конец ввода)[/dim]")

        lines = []
        try:
            while True:
                line = input()
                if line == '':
                    break
                lines.append(line)
        except EOFError:
            pass
        return '\n'.join(lines)


# ═══════════════════════════════════════════════════════════════════════════════
# ПРИЛОЖЕНИЕ
# ═══════════════════════════════════════════════════════════════════════════════

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog='caesar-encode',
        description='Caesar Encoder — шифрование и расшифровка шифром Цезаря',
    )
    p.add_argument('key', type=int, help='Ключ (сдвиг), может быть отрицательным')
    p.add_argument('text', nargs='*', help='Текст (иначе stdin или ввод с клавиатуры)')
    p.add_argument('-d', '--decode', action='store_true',
                   help='Расшифровать (сдвиг на -ключ)')
    p.add_argument('-r', '--raw', action='store_true',
                   help='Вывести только результат (удобно для pipe)')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Подробный лог в stderr')
    return p.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    ui = UI()

    if args.text:
        text = ' '.join(args.text)
        source = 'args'
    elif not sys.stdin.isatty():
        text = sys.stdin.read().rstrip('\n')
        source = 'stdin'
    else:
        if args.raw:
            ui.error("в режиме --raw нужно передать текст аргументом или через pipe")
            return 1
        ui.header()
        text = ui.ask_multiline("Введите текст:")
        source = 'prompt'

    log.debug("input from %s: %d chars", source, len(text))
    if not text:
        log.debug("empty input, nothing to do")
        return 0

    shift = -args.key if args.decode else args.key
    result = transform(shift, text)
    log.debug("key=%d decode=%s effective shift=%d", args.key, args.decode, shift)

    if args.raw:
        print(result)
    else:
        ui.result(args.key, args.decode, text, result)
    return 0


def main():
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\n👋")
        sys.exit(130)


if __name__ == '__main__':
    main()
