# --- Display ---
NARROW_WIDTH = 360          # playfield width on small screens
WIDE_WIDTH = 800            # playfield width on large screens
NARROW_BREAKPOINT = 500     # screens narrower than this get NARROW_WIDTH
HEIGHT = 600
FPS = 60
TICK_HZ = 60                # simulation ticks per second (fixed step)
MAX_CATCHUP_TICKS = 5       # ticks run at most per rendered frame after a stall

# --- Craft ---
CRAFT_X = 120               # default x at run start
CRAFT_Y = 500               # fixed y (only x is player-controlled)
CRAFT_W = 80
CRAFT_H = 60

# --- Obstacles ---
MIN_LIVE_OBSTACLES = 6      # recycle keeps at least this many obstacles alive
OFFSCREEN_MARGIN = 100      # drop obstacles once y > HEIGHT + margin
INITIAL_OFFSET_Y = -150     # first pair above the visible area
INITIAL_PAIRS = 3
INITIAL_PAIR_STEP = 200     # vertical step between the opening pairs
OBSTACLE_MAX_W = 150
GAP_MARGIN = 20             # gap never closer than this to a wall

# --- Difficulty ---
LEVEL_THRESHOLD = 5         # points per level
BASE_SCROLL_SPEED = 2.0     # px / tick
SPEED_GROWTH_RATE = 0.05    # relative speed gain per point
MAX_SCROLL_SPEED = 4.0
MOVE_SPEED_BASE = 5.0       # craft px / tick at level 1
MOVE_SPEED_PER_LEVEL = 0.25
MOVE_SPEED_MAX = 7.0
GAP_MIN_BASE = 150
GAP_MAX_BASE = 190
GAP_GROWTH_PER_LEVEL = 4    # both gap bounds widen a little per level
GAP_GROWTH_MAX_LEVEL = 6    # ... up to this level
SPACING_BASE = 250          # vertical distance between consecutive pairs
SPACING_SHRINK_PER_LEVEL = 10
SPACING_MIN = 180

# --- Scoring / collision ---
HITBOX_MARGIN = 5           # forgiveness shrink per side (px)
PASS_THRESHOLD = 20         # obstacle must be this far below the craft to count
SEED_DEFAULT = 12345

# --- Colors (RGB) ---
COLOR_BG = (14, 22, 40)
COLOR_FG = (226, 234, 250)
COLOR_CRAFT = (120, 200, 255)
COLOR_CRASH = (255, 86, 110)
COLOR_OBSTACLE = (70, 84, 110)
COLOR_OBSTACLE_TOWER = (92, 104, 134)
COLOR_HITBOX = (255, 200, 90)
