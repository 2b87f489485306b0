"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et exceptions. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(adapters, frameworks web, BDD).

Sous-packages :
- entities/ : Entités métier (Movie, Review)
- ports/ : Interfaces abstraites pour la persistance et le cache
- value_objects/ : Projections et requêtes validées
"""
