import logging
import os
import sys

# Ensure we can import modules
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from tinkertone import config
from tinkertone.audio.engine import AudioEngine
from tinkertone.audio.errors import ToneError
from tinkertone.scene import ToneScene
from tinkertone.utils.config_manager import ConfigManager


def main():
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")
    print("--- TINKERTONE ---")

    cfg = ConfigManager()
    engine = AudioEngine(sample_rate=cfg.get_audio_config().get("sample_rate", config.SAMPLE_RATE))

    actions = {
        config.KEY_PLAY_PRIMARY: ("Play primary tone", "play_primary"),
        config.KEY_PLAY_SECONDARY: ("Play secondary tone", "play_secondary"),
        config.KEY_COMBINE: ("Mix primary + secondary", "combine"),
        config.KEY_INSERT: ("Insert secondary after primary", "insert"),
        config.KEY_KEYBOARD: ("Play piano key sequence", "play_keyboard"),
        config.KEY_SQUARE: ("Play primary as square", "play_square"),
    }

    try:
        scene = ToneScene(cfg, player=engine)
    except ToneError as e:
        print(f"[Main] Bad settings in {cfg.settings_path}: {e}")
        return

    with engine:
        for key, (label, _) in actions.items():
            print(f"  [{key}] {label}")
        print(f"  [{config.KEY_QUIT}] Quit")

        while True:
            try:
                key = input("> ").strip().lower()
            except EOFError:
                break
            if key == config.KEY_QUIT:
                break
            if key not in actions:
                continue
            try:
                sound = getattr(scene, actions[key][1])()
            except ToneError as e:
                print(f"[Main] {e}")
                continue
            if sound is not None and config.BLOCKING_PLAYBACK:
                engine.finished.wait()

    print("[Main] Bye.")


if __name__ == "__main__":
    main()
