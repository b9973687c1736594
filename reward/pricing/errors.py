class InvalidArgument(ValueError):
    """
    Requête rejetée par le moteur de calcul.
    Seul cas levé: "TransactionDate" illisible au format dd-MMM-yyyy.
    La couche HTTP la traduit en 400 (jamais retentée).
    """
    def __init__(self, message: str, code: str = "invalid_argument"):
        super().__init__(message)
        self.message = message
        self.code = code
