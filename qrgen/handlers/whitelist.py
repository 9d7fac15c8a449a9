"""Shared user whitelist check."""

import os


def is_authorized(user_id: int) -> bool:
    """Check user against BOT_WHITELIST; empty whitelist allows all."""
    whitelist_str = os.getenv("BOT_WHITELIST", "")
    if not whitelist_str:
        return True

    whitelist = [
        int(uid.strip())
        for uid in whitelist_str.split(",")
        if uid.strip()
    ]
    return user_id in whitelist
