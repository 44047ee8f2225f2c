# --- Synthesis ---
SAMPLE_RATE = 44100
HEADROOM = 0.25       # Applied at synthesis so mixed sounds don't clip
GLOBAL_VOLUME = 0.25  # Scene volume applied before playback

# --- Playback ---
BLOCKING_PLAYBACK = True

# --- Keybinds ---
KEY_PLAY_PRIMARY = '1'
KEY_PLAY_SECONDARY = '2'
KEY_COMBINE = 'c'
KEY_INSERT = 'i'
KEY_KEYBOARD = 'k'
KEY_SQUARE = 's'
KEY_QUIT = 'q'
