"""Allow ``python -m exercise_tracker``."""

from exercise_tracker.main import main

main()
