# cafeops/console_style.py
def bold(text: str) -> str:
    return f"\033[1m{text}\033[0m"


def green(text: str) -> str:
    return f"\033[92m{text}\033[0m"


def red(text: str) -> str:
    return f"\033[91m{text}\033[0m"


def yellow(text: str) -> str:
    return f"\033[93m{text}\033[0m"


def quality_color(text: str, quality: float) -> str:
    """Couleur selon la qualité : vert >= 75, jaune >= 50, rouge sinon."""
    if quality >= 75:
        return green(text)
    if quality >= 50:
        return yellow(text)
    return red(text)
