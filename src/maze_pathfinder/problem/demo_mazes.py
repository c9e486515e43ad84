"""Built-in mazes used by the ``demo`` command."""

DEMO_MAZES = {
    "mud_detour": [
        "XXXXXXX",
        "XI.M..X",
        "X.....X",
        "XKX.XGX",
        "XXXXXXX"
    ],
    "key_between_walls": [
        "XXXXXXX",
        "XI....X",
        "X.....X",
        "X.XKXGX",
        "XXXXXXX"
    ],
    "key_behind_mud": [
        "XXXXXXX",
        "XI.G..X",
        "X.MMMGX",
        "X.XKX.X",
        "XXXXXXX"
    ],
    "two_goals": [
        "XXXXXXX",
        "X.....X",
        "X.GIMGX",
        "X.XKX.X",
        "XXXXXXX"
    ],
    "no_key": [
        "XXXXXXX",
        "X.....X",
        "X.GIMGX",
        "X.X.X.X",
        "XXXXXXX"
    ],
    "walled_in": [
        "XXXXXXX",
        "XK.X..X",
        "X.XIXGX",
        "X.X.X.X",
        "XXXXXXX"
    ],
}
