import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure le logging racine une seule fois (appelée au démarrage)."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("app").setLevel(level.upper())


def mask_token(token: str) -> str:
    """Ne garde que le début d'un token pour les logs."""
    if not token:
        return "<none>"
    return f"{token[:6]}…"
