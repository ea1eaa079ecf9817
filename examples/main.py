"""
main.py — Run a local Hot Seat Show
====================================

This is the entry point. Pick how many demo contestants to seat,
whether a demo host runs the show, and run.

    python main.py

The runner will:
  1. Seat the demo participants on in-memory sockets
  2. Play fastest finger to pick the hot seat player
  3. Climb the money ladder until the hot seat wins or misses
  4. Start the next round until the round limit

Press Ctrl+C to stop.
"""

from hotseat_show import ShowRunner

# ── Configuration ──
config = {
    # Who plays
    "demo_contestants": 3,
    "demo_show_host": False,        # True: a demo host presses the buttons

    # How long to play
    "max_rounds": 2,

    # 0.25 runs every automatic wait four times faster
    "time_scale": 0.25,

    # Custom question banks (JSON arrays); leave None for the bundled ones
    "fastest_finger_bank_path": None,
    "hot_seat_bank_path": None,

    # Logging
    "log_file": "hotseat_show.log",
    "log_level": "INFO",
    "phase_mode": True,             # one line per phase on the terminal
}

# ── Seat the players and run ──
runner = ShowRunner(config=config)
runner.add_demo_players()
runner.run()
