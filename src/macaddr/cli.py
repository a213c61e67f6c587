from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import address, local
from .address import FORMATS, MAC_SIZE, STYLES
from .vendor import OUILookup


def _render(addr: bytes, style: str | None) -> str:
    return address.format_as(addr, style or "ieee")


def cmd_format(args: argparse.Namespace) -> int:
    console = Console()
    addr = address.parse(args.text, args.input)

    if args.style:
        console.print(address.format_as(addr, args.style))
        return 0

    t = Table(title=args.text, show_lines=False)
    t.add_column("Style", style="bold")
    t.add_column("Value")
    for style in STYLES:
        # Cisco words are 16 bits; an OUI doesn't split into them
        if style == "cisco" and len(addr) != MAC_SIZE:
            t.add_row(style, "[dim]n/a[/dim]")
        else:
            t.add_row(style, address.format_as(addr, style))
    console.print(t)
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    console = Console()
    addr = address.parse(args.text, args.input)

    oui = address.oui(addr)
    manufacturer = OUILookup().manufacturer(addr) or "(unknown)"

    t = Table(title=address.to_string(addr), show_header=False)
    t.add_column("Field", style="bold")
    t.add_column("Value")
    t.add_row("Bits", str(len(addr) * 8))
    t.add_row("Integer", str(address.to_integer(addr)))
    t.add_row("I/G bit", str(address.ig_bit(addr)))
    t.add_row("Cast", "multicast" if address.is_multicast(addr) else "unicast")
    t.add_row("U/L bit", str(address.ul_bit(addr)))
    t.add_row("Administration", "local" if address.is_local(addr) else "universal")
    t.add_row("Broadcast", "yes" if address.is_broadcast(addr) else "no")
    t.add_row("OUI", address.to_string(oui) if oui is not None else "(none)")
    t.add_row("Manufacturer", manufacturer)
    console.print(t)
    return 0


def cmd_random(args: argparse.Namespace) -> int:
    console = Console()
    prefix = address.parse(args.prefix) if args.prefix else b""

    for _ in range(args.count):
        console.print(_render(address.random(prefix), args.style))
    return 0


def cmd_seq(args: argparse.Namespace) -> int:
    console = Console()
    addr = address.parse(args.text, args.input)

    for _ in range(args.count):
        console.print(_render(addr, args.style))
        addr = address.add(addr, args.step)
    return 0


def cmd_local(args: argparse.Namespace) -> int:
    console = Console()

    if args.interface or args.ip:
        if args.interface:
            found = local.by_interface(args.interface)
        else:
            found = local.by_ip_address(args.ip)
        if found is None:
            console.print("[yellow]No matching interface[/yellow]")
            return 1
        console.print(_render(found, args.style))
        return 0

    t = Table(title="Local interfaces", show_lines=False)
    t.add_column("Interface", style="bold")
    t.add_column("MAC")
    t.add_column("IP addresses")
    for i in local.interfaces():
        t.add_row(i.name, _render(i.hardware_address, args.style), ", ".join(i.ip_addresses))
    console.print(t)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="macaddr")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_input(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("text", help="MAC address or OUI, e.g. 15-EF-2E-91-97-7A")
        cmd.add_argument(
            "--input",
            default="hex",
            choices=FORMATS,
            help="How to read TEXT: hex (default, lenient) or dotted_decimal/oid",
        )

    def add_style(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("--style", choices=STYLES, help="Output style (default: ieee)")

    format_cmd = sub.add_parser("format", help="Show an address in every style, or one")
    add_input(format_cmd)
    add_style(format_cmd)
    format_cmd.set_defaults(func=cmd_format)

    info_cmd = sub.add_parser("info", help="Classify an address")
    add_input(info_cmd)
    info_cmd.set_defaults(func=cmd_info)

    random_cmd = sub.add_parser("random", help="Generate random addresses")
    random_cmd.add_argument("--prefix", help="Fixed upper half (hex), usually an OUI")
    random_cmd.add_argument("--count", type=int, default=1, help="How many addresses")
    add_style(random_cmd)
    random_cmd.set_defaults(func=cmd_random)

    seq_cmd = sub.add_parser("seq", help="Consecutive addresses starting at TEXT")
    add_input(seq_cmd)
    seq_cmd.add_argument("--count", type=int, default=1, help="How many addresses")
    seq_cmd.add_argument("--step", type=int, default=1, help="Increment, may be negative")
    add_style(seq_cmd)
    seq_cmd.set_defaults(func=cmd_seq)

    local_cmd = sub.add_parser("local", help="MAC addresses of this machine")
    which = local_cmd.add_mutually_exclusive_group()
    which.add_argument("--interface", help="Only the interface with this name")
    which.add_argument("--ip", help="Only the interface with this IP address")
    add_style(local_cmd)
    local_cmd.set_defaults(func=cmd_local)

    return p


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv: list[str] | None = None) -> None:
    try:
        parser = build_parser()
        args = parser.parse_args(argv)
        _setup_logging(args.verbose)
        code = args.func(args)
        raise SystemExit(code)
    except KeyboardInterrupt:
        raise SystemExit(2)
    except Exception as e:
        Console().print(f"[red]Error:[/red] {e}")
        raise SystemExit(2)
