"""Named colors recognized by shine() and pulse().

Ordered as listed; list_colors() returns names in this order.
"""

from typing import Tuple

NAMED_COLORS: Tuple[Tuple[str, str], ...] = (
    ("aqua", "#00FFFF"),
    ("banana", "#E3CF57"),
    ("beige", "#F5F5DC"),
    ("blue", "#0000FF"),
    ("brick", "#9C661F"),
    ("brown", "#A52A2A"),
    ("carrot", "#ED9121"),
    ("chartreuse", "#7FFF00"),
    ("chocolate", "#D2691E"),
    ("cobalt", "#3D59AB"),
    ("coral", "#FF7F50"),
    ("crimson", "#DC143C"),
    ("cyan", "#00FFFF"),
    ("fuchsia", "#FF00FF"),
    ("gold", "#FFD700"),
    ("gray", "#808080"),
    ("green", "#008000"),
    ("indigo", "#4B0082"),
    ("ivory", "#FFFFF0"),
    ("lavender", "#E6E6FA"),
    ("lime", "#00FF00"),
    ("magenta", "#FF00FF"),
    ("maroon", "#800000"),
    ("melon", "#E3A869"),
    ("mint", "#BDFCC9"),
    ("navy", "#000080"),
    ("olive", "#808000"),
    ("orange", "#FF8000"),
    ("orchid", "#DA70D6"),
    ("peacock", "#33A1C9"),
    ("pink", "#FFC0CB"),
    ("plum", "#DDA0DD"),
    ("purple", "#800080"),
    ("raspberry", "#872657"),
    ("red", "#FF0000"),
    ("salmon", "#FA8072"),
    ("sepia", "#5E2612"),
    ("sienna", "#A0522D"),
    ("silver", "#C0C0C0"),
    ("snow", "#FFFAFA"),
    ("tan", "#D2B48C"),
    ("teal", "#008080"),
    ("thistle", "#D8BFD8"),
    ("tomato", "#FF6347"),
    ("turquoise", "#40E0D0"),
    ("violet", "#EE82EE"),
    ("white", "#FFFFFF"),
    ("yellow", "#FFFF00"),
)
