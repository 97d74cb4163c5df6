"""
Use Cases - Cas d'utilisation de l'application.

Chaque use case:
    - recoit une requete (dataclass) et, si privilegie, les roles de l'appelant
    - verifie dans l'ordre: autorisation, existence, unicite, integrite
    - retourne un Result (succes ou DomainException), sans lever pour
      les erreurs metier attendues

Modules:
    - auth/: Connexion, validation d'utilisateur
    - users/: Utilisateurs et affectation de roles
    - roles/: Amorcage et liste des roles
    - influencers/: Influenceurs et profils sociaux
    - brands/: Marques
    - beats/: Beats
"""
