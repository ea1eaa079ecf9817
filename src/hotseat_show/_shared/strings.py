# Area: Shared
"""
hotseat_show._shared.strings — Display strings
===============================================

Pre-localized English labels used for dialog buttons, headers and
banners. Clients render these verbatim.
"""

YES = "Yes"
NO = "No"

# Fastest finger
CUE_FASTEST_FINGER_MUSIC = "Cue fastest finger music"
SHOW_FASTEST_FINGER_QUESTION = "Show fastest finger question"
REVEAL_FASTEST_FINGER_CHOICE = "Reveal fastest finger choices"
CUE_FASTEST_FINGER_ANSWER_REVEAL_AUDIO = "Cue answer reveal audio"
REVEAL_FASTEST_FINGER_ANSWER = "Reveal next answer"
REVEAL_FASTEST_FINGER_RESULTS = "Reveal fastest finger results"
ACCEPT_HOT_SEAT_PLAYER = "Accept hot seat player"
FASTEST_FINGER_WINNER = "Fastest finger winner"
NO_FASTEST_FINGER_WINNER = "Nobody got it! Let's try another"

# Hot seat
SHOW_HOT_SEAT_RULES = "Show hot seat rules"
HIGHLIGHT_LIFELINE = "Highlight next lifeline"
CUE_HOT_SEAT_QUESTION = "Cue hot seat question"
SHOW_HOT_SEAT_QUESTION = "Show hot seat question"
REVEAL_HOT_SEAT_CHOICE = "Reveal next choice"
HOT_SEAT_FINAL_ANSWER = "Final answer?"
HOT_SEAT_VICTORY = "Reveal correct answer"
HOT_SEAT_LOSS = "Reveal correct answer"
SHOW_SCORES = "Show scores"
NEXT_ROUND = "Start next round"
TOTAL_WINNINGS = "Total winnings"

# Lifelines
USE_LIFELINE = "Use this lifeline?"
DO_FIFTY_FIFTY = "Remove two wrong answers"
ASK_THE_AUDIENCE = "Poll the audience"
CLOSE_AUDIENCE_POLL = "Close the poll"
PICK_PHONE_A_FRIEND = "Who would you like to call?"
PHONE_A_FRIEND = "Call friend"
END_PHONE_CALL = "End call"
