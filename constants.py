# --- Room Symbols ---
EMPTY = "."  # Empty room in maze
WALL = "*"  # Wall in maze
START = "S"  # Start of maze
EXIT = "E"  # End of maze

# --- Text Rendering ---
VISITED_MARKER = "o"  # Visited (non-start) rooms in debug print
PATH_MARKER = "+"  # Rooms on the shortest path

# --- Random Maze Generation ---
DEFAULT_ROWS = 10
DEFAULT_COLS = 10
PERCENT_WALLS = 0.25  # Fraction of rooms that become walls

# --- Distance Field ---
UNSET_DISTANCE = 0  # Relaxation sentinel; exits also hold 0
UNREACHABLE = -1
MAX_RELAXATION_STEPS = 10_000_000  # Cap on candidate offers during relaxation
DISTANCE_METHOD_BFS = "bfs"
DISTANCE_METHOD_RELAXATION = "relaxation"

# --- 3D Printable Export ---
STL_CELL_SIZE = 5.0  # Footprint of one room (mm)
STL_WALL_HEIGHT = 6.0
STL_BASE_THICKNESS = 1.5
STL_PATH_HEIGHT = 0.6  # Raised trail marking the solution
STL_PATH_WIDTH_RATIO = 0.3  # Trail width relative to the cell size

# --- Visualization ---
VIS_FIGURE_SIZE = 8  # Inches along the longer maze side
VIS_DPI = 150
VIS_EMPTY_COLOR = "white"
VIS_WALL_COLOR = "blue"
VIS_START_COLOR = "magenta"
VIS_EXIT_COLOR = "red"
VIS_CELL_EDGE_COLOR = "lightgrey"
VIS_CELL_EDGE_LW = 0.5
VIS_VISITED_COLOR = "green"
VIS_VISITED_RADIUS = 0.25  # In cell units
VIS_PATH_COLOR = "magenta"
VIS_PATH_RADIUS = 0.1
VIS_DISTANCE_FONT_SIZE = 7
VIS_DISTANCE_CMAP = "viridis"
VIS_UNREACHABLE_COLOR = "lightgrey"
