"""
Turning results into the single answer line each solver prints.
"""

def comma_pair(a, b):
    return f"{a}, {b}"

def concat(items):
    return "".join(map(str, items))

def sum_expression(values):
    """Shows how a total was formed, e.g. "3 + 2 + 1 = 6"."""
    if not values: return "0"
    return " + ".join(map(str, values)) + f" = {sum(values)}"

def labelled(label, value):
    return f"{label}: {value}"

def line_per_item(items, missing="none found"):
    """One line per item, with None shown as the missing text."""
    return "\n".join(missing if z is None else str(z) for z in items)
