class ShareNotAvailable(Exception):
    """Aucune application de partage disponible côté client"""


class ShareTarget:
    """Contrat d'un destinataire de partage"""

    def send(self, text, mime_type):
        raise NotImplementedError
