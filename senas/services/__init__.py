"""Match and leaderboard domain services.

Imported by the HTTP blueprints and page routes, keeping transport
concerns separate from the match lifecycle.
"""
