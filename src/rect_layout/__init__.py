"""rect-layout: compose 2-D scenes by aligning, spreading and grouping rectangles."""

import logging

from ._version import __version__
from .core.errors import (
    LayoutError,
    EmptyCollectionError,
    DegenerateGeometryError,
    LayoutConfigError,
)
from .core.protocol import LayoutObject, is_layout_object
from .core.geometry import Rect, rect
from .core.sprite import Sprite, sprite, sprite_content, with_sprite_content
from .core.group import Group, group, group_children, with_group_children
from .layout.accessors import (
    center_x,
    center_y,
    with_center_x,
    with_center_y,
    max_width,
    max_height,
    left,
    top,
    right,
    bottom,
    with_right,
    with_bottom,
    surrounding_rect,
)
from .transform.edges import (
    threshold_left,
    threshold_right,
    threshold_top,
    threshold_bottom,
    extrude,
    constrain_width,
    constrain_height,
)
from .transform.align import align_left, align_top, align_right, align_bottom
from .transform.arrange import (
    spread_horizontal,
    spread_vertical,
    distribute_horizontal,
    distribute_vertical,
    flow_horizontal,
    flow_vertical,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "__version__",
    # errors
    "LayoutError",
    "EmptyCollectionError",
    "DegenerateGeometryError",
    "LayoutConfigError",
    # objects
    "LayoutObject",
    "is_layout_object",
    "Rect",
    "rect",
    "Sprite",
    "sprite",
    "sprite_content",
    "with_sprite_content",
    "Group",
    "group",
    "group_children",
    "with_group_children",
    # accessors
    "center_x",
    "center_y",
    "with_center_x",
    "with_center_y",
    "max_width",
    "max_height",
    "left",
    "top",
    "right",
    "bottom",
    "with_right",
    "with_bottom",
    "surrounding_rect",
    # transforms
    "threshold_left",
    "threshold_right",
    "threshold_top",
    "threshold_bottom",
    "extrude",
    "constrain_width",
    "constrain_height",
    "align_left",
    "align_top",
    "align_right",
    "align_bottom",
    "spread_horizontal",
    "spread_vertical",
    "distribute_horizontal",
    "distribute_vertical",
    "flow_horizontal",
    "flow_vertical",
]
