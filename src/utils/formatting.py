from __future__ import annotations

from domain.rates import Rate, RateTable


def format_rate(value: float) -> str:
    return f"{value:.4f}"


def format_amount(value: float) -> str:
    return f"{value:.2f}"


def format_rate_line(rate: Rate) -> str:
    return f"{rate.code} {rate.name} {format_rate(rate.rate)}"


def render_rate_table(table: RateTable) -> list[str]:
    """Render rates sorted by code as aligned text columns."""
    lines = [f"Table {table.id or '-'} published {table.published_at.isoformat()}"]
    if not table.rates:
        lines.append("  (empty)")
        return lines

    rows = [(rate.code, rate.name, format_rate(rate.rate)) for rate in table.sorted_by_code()]
    code_width = max(len("Code"), max(len(code) for code, _, _ in rows))
    name_width = max(len("Currency"), max(len(name) for _, name, _ in rows))
    rate_width = max(len("Rate"), max(len(value) for _, _, value in rows))

    header = f"{'Code':<{code_width}} {'Currency':<{name_width}} {'Rate':>{rate_width}}"
    lines.extend([header, "-" * len(header)])
    for code, name, value in rows:
        lines.append(f"{code:<{code_width}} {name:<{name_width}} {value:>{rate_width}}")
    return lines
