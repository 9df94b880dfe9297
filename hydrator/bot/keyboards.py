"""Inline keyboard builders."""

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from hydrator.utils.constants import DRINK_CALLBACK


def drink_keyboard() -> InlineKeyboardMarkup:
    """Keyboard for reminder messages: a single acknowledge button."""
    return InlineKeyboardMarkup(
        [[InlineKeyboardButton("💧 I drank", callback_data=DRINK_CALLBACK)]]
    )
