"""Badge layout constants, in viewBox units.

The viewBox is VIEWBOX_SCALE times larger than the pixel grid of a 20px
badge so that text paths keep sub-pixel detail without fractional numbers.
"""

VIEWBOX_SCALE = 100

VIEWBOX_HEIGHT = 20 * VIEWBOX_SCALE
SIDE_MARGIN = 5 * VIEWBOX_SCALE
MIDDLE_MARGIN = 11 * VIEWBOX_SCALE
LINE_HEIGHT = 11 * VIEWBOX_SCALE

MASK_ID = "m"
GRADIENT_ID = "g"
LABEL_PATH_ID = "l"
STATUS_PATH_ID = "s"

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
