from collections import namedtuple

from config import GAME_CONFIG

Tier = namedtuple('Tier', ['image_id', 'price', 'threshold'])


class ProgressionTable:
    """
    Liste ordonnée des paliers. Donne le poisson affiché
    en fonction du nombre total d'unités vendues.
    """

    def __init__(self, tiers):
        tiers = tuple(tiers)
        if not tiers:
            raise ValueError("La table de progression est vide")
        if tiers[0].threshold != 0:
            raise ValueError("Le premier palier doit avoir un seuil de 0")

        previous = None
        for tier in tiers:
            if tier.price <= 0:
                raise ValueError(f"Prix invalide pour {tier.image_id}: {tier.price}")
            if tier.threshold < 0:
                raise ValueError(f"Seuil négatif pour {tier.image_id}")
            if previous is not None and tier.threshold < previous.threshold:
                raise ValueError(f"Seuils non triés à {tier.image_id}")
            previous = tier

        self._tiers = tiers

    @classmethod
    def from_config(cls, rows=None):
        rows = GAME_CONFIG["tiers"] if rows is None else rows
        return cls(Tier(r["image"], r["price"], r["threshold"]) for r in rows)

    @property
    def first(self):
        return self._tiers[0]

    @property
    def tiers(self):
        return self._tiers

    def __len__(self):
        return len(self._tiers)

    def lookup(self, units_sold):
        """Renvoie le palier de plus haut seuil <= units_sold"""
        current = self._tiers[0]
        for tier in self._tiers:
            if units_sold >= tier.threshold:
                current = tier
            else:
                # La liste est triée : inutile d'aller plus loin
                break
        return current
