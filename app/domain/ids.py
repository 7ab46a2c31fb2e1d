# app/domain/ids.py
import uuid


def normalize_id(value) -> str | None:
    """
    Id dokumentow i produktow to UUID w postaci tekstowej.
    Zwraca postac kanoniczna (male litery, z myslnikami) albo None dla zlego formatu.
    Zapisujemy i porownujemy tylko postac kanoniczna.
    """
    if not isinstance(value, str):
        return None
    try:
        return str(uuid.UUID(value))
    except ValueError:
        return None
