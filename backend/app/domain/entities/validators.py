"""
Validateurs partagés par les schémas de mise à jour partielle.

Un champ absent du corps n'est pas modifié ; un `null` explicite sur une
colonne obligatoire est refusé avant d'atteindre la base.
"""
from pydantic import field_validator


def _reject_null(cls, value):
    if value is None:
        raise ValueError("must not be null")
    return value


def non_nullable(*fields: str):
    """A assigner dans la classe : `_required = non_nullable("title", ...)`"""
    return field_validator(*fields)(_reject_null)
