"""
FILE: ticklist/repl/style.py
PURPOSE: Small feedback messages for REPL actions
EXPORTS:
  - celebrate_add() -> str
  - celebrate_done() -> str
  - celebrate_delete() -> str
  - celebrate_all_done() -> str
DEPENDENCIES:
  - random (for variety)
NOTES:
  - Kept subtle: one short line per action
"""

import random


ADD_CELEBRATIONS = [
    "+ *noted* +",
    "✓ *captured* ✓",
    "○ *listed* ○",
]

DONE_CELEBRATIONS = [
    "✨ *sparkle* ✨",
    "⭐ *shine* ⭐",
    "🎉 *pop* 🎉",
]

DELETE_ANIMATIONS = [
    "💨 *poof* 💨",
    "× *removed* ×",
    "∅ *gone* ∅",
]

ALL_DONE_CELEBRATIONS = [
    "🏁 *all clear* 🏁",
    "🚀 *nothing left* 🚀",
]


def celebrate_add() -> str:
    return random.choice(ADD_CELEBRATIONS)


def celebrate_done() -> str:
    return random.choice(DONE_CELEBRATIONS)


def celebrate_delete() -> str:
    return random.choice(DELETE_ANIMATIONS)


def celebrate_all_done() -> str:
    return random.choice(ALL_DONE_CELEBRATIONS)

