"""
Couche domaine (core).

Contient les objets valeur, les exceptions métier et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, réseau).

Sous-packages :
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (ShowSignal, MediaInfo, PlacementResult)
"""
