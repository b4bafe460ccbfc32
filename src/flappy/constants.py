"""
constants.py: Centralized configuration for the game world and its assets.
"""

# -------- Screen / World Config --------
SCREEN_WIDTH = 432
SCREEN_HEIGHT = 768
GROUND_HEIGHT = 112
GROUND_Y = SCREEN_HEIGHT - GROUND_HEIGHT   # Top of the ground strip
BIRD_X = 100                               # Fixed bird X position
BIRD_SIZE = 34                             # Square hitbox
RESPAWN_Y = SCREEN_HEIGHT / 2

# -------- Pipe Config --------
PIPE_WIDTH = 52
PIPE_GAP = 160
PIPE_SPEED = 2.5                # Horizontal speed (units/tick)
PIPE_SPAWN_INTERVAL = 100       # Spawn every 100 ticks
PIPE_MARGIN = 100               # Gap never starts closer than this to the top
PIPE_GAP_RANGE = SCREEN_HEIGHT - 300
PIPE_SPRITE_HEIGHT = 320

# -------- Physics Config (units / tick) --------
GRAVITY = 0.45
JUMP_IMPULSE = -8.5

# -------- Splash Animation --------
BOB_FREQUENCY = 0.15
BOB_AMPLITUDE = 8
BIRD_FRAME_COUNT = 3

# -------- Client Config --------
RENDER_FPS = 60
HIGHSCORE_FILE = "highscore.txt"
ASSETS_DIR = "assets"
FLAP_SOUND = "audio/wing.wav"
HIT_SOUND = "audio/hit.wav"
