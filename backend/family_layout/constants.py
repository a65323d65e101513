"""
Layout and renderer constants for the family tree view.
Spacing defaults are used when the caller does not pass a LayoutConfig.
"""

# Vertical distance between generation rows
DEFAULT_GENERATION_SPACING = 320

# Gap between unrelated members / sibling groups in the same row
DEFAULT_MEMBER_SPACING = 280

# Rendered card width
DEFAULT_NODE_WIDTH = 150

# Gap between siblings inside one sibling group
DEFAULT_SIBLING_SPACING = 50

# Used when the caller cannot report a viewport (server side)
DEFAULT_VIEWPORT_WIDTH = 1000

# Renderer contract
NODE_TYPE = "familyMember"
SOURCE_POSITION = "bottom"
TARGET_POSITION = "top"

EDGE_TYPE = "smoothstep"
EDGE_COLOR = "#059669"
EDGE_MARKER = {"type": "arrowclosed", "color": EDGE_COLOR, "width": 22, "height": 22}
EDGE_STYLE = {
    "stroke": EDGE_COLOR,
    "strokeWidth": 3,
    "strokeLinecap": "round",
    "filter": "drop-shadow(0 2px 4px rgba(0,0,0,0.1))",
}
EDGE_PATH_OPTIONS = {"borderRadius": 30}
