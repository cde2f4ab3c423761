import os

# --- GLOBAL CONFIGURATION ---
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 320
FPS = 30
DB_FILE = os.getenv("POCKETPET_DB_FILE", "pet_life.db")
LOG_LEVEL = os.getenv("POCKETPET_LOG_LEVEL", "INFO")
SAVE_INTERVAL_SECONDS = 5.0

# Real seconds per game minute. Set POCKETPET_SECONDS_PER_MINUTE to speed things up.
SECONDS_PER_GAME_MINUTE = float(os.getenv("POCKETPET_SECONDS_PER_MINUTE", "0.25"))

# --- TIME MODEL (game minutes) ---
MINUTES_PER_DAY = 1440      # 1 pet year == 1 game day
MINUTES_PER_HOUR = 60
DAY_PHASE_LIMIT = 720       # minute_of_day >= this counts as night
START_MINUTE_OF_DAY = 480   # 8 AM
MAX_CATCHUP_MINUTES = MINUTES_PER_DAY * 2

# Natural life expectancy in pet years, by species name
LIFE_EXPECTANCY = {
    "FOX": 10,
    "AXOLOTL": 15,
}

# Sleep lasts a nap by day, a full night otherwise
NAP_MINUTES = 60
NIGHT_SLEEP_MINUTES = 360

# --- VITALS ---
VITAL_MIN = 0.0
VITAL_MAX = 100.0

INITIAL_VITALS = {
    'hunger': 50.0,   # 0 = Full, 100 = Starving
    'mood': 100.0,
    'energy': 100.0,
    'weight': 50.0,
    'health': 100.0,
}

# --- THRESHOLDS ---
HUNGER_STARVING = 90
HUNGER_FULL = 10
MOOD_LOW = 10
ENERGY_LOW = 10
PLAY_MIN_ENERGY = 33

NEGLECT_MINUTES = 180       # a condition must persist this long before it costs health
FATAL_MINUTES = 720

# --- SPECIAL PHASE ---
SPECIAL_SCORE = 95
SPECIAL_BONUS_YEARS = 5

# --- ACTION EFFECTS ---
FEED_EFFECT = {'hunger': -10, 'weight': 10, 'mood': 5, 'energy': 5}
SLEEP_EFFECT = {'weight': -5, 'mood': 15}
CLEAN_MOOD_BONUS = 10

# Per hour, on top of the normal decay
DANCE_EFFECT = {'hunger': 5, 'weight': -1, 'mood': 5, 'energy': -5}

# --- RETRO UI PALETTE ---
COLOR_PET_BODY = (171, 220, 255)
COLOR_PET_EYES = (33, 37, 43)
COLOR_UI_BAR_BG = (62, 68, 81)
COLOR_HEALTH = (152, 195, 121)
COLOR_HUNGER = (224, 108, 117)
COLOR_MOOD = (229, 192, 123)
COLOR_ENERGY = (97, 175, 239)
COLOR_WEIGHT = (198, 120, 221)
COLOR_TEXT = (171, 178, 191)
COLOR_BTN = (100, 100, 100)
COLOR_SICK = (198, 120, 221)
COLOR_DEAD = (80, 80, 80)

# --- Day/Night Cycle Colors ---
COLOR_DAY_BG = (135, 206, 235)  # Sky Blue
COLOR_DUSK_BG = (255, 165, 0)   # Orange
COLOR_NIGHT_BG = (25, 25, 112)  # Midnight Blue
COLOR_DAWN_BG = (255, 223, 186) # Peach Puff

WHITE = (255, 255, 255)
YELLOW = (255, 215, 0)
