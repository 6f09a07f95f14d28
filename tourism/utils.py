def generate_id(prefix: str, value: int, size: int) -> str:
    """
    Fabrique un identifiant lisible : préfixe + zéros + valeur.

    generate_id("VIS", 7, 8) -> "VIS00007"

    Si le préfixe et la valeur dépassent déjà `size`, aucun zéro n'est ajouté
    et l'identifiant est plus long que `size` (pas de troncature).
    """
    digits = str(value)
    padding = size - (len(prefix) + len(digits))
    return prefix + "0" * max(padding, 0) + digits
