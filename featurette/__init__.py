"""
Featurette - Reconciliation des bonus (special features) d'une videotheque.

Ce package maintient la coherence entre les bonus decouverts sur le disque
(repertoires "extras" / "specials") et la liste d'identifiants persistee
sur chaque film, et cascade le rafraichissement des metadonnees vers ces bonus.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (scan, reconciliation, hooks de rafraichissement)
- adapters/ : Couche infrastructure (CLI, système de fichiers, résolution, stockage)
"""
