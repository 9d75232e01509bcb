"""Command-line entry point of the ecosystem simulator."""

from __future__ import annotations

import argparse
import logging
import sys

from .engine import GameEngine
from .window import WindowError

_TITLE = "Simulateur d'Écosystème Intelligent"
_WIDTH = 1200.0
_HEIGHT = 600.0

_CONTROLS = (
    "=== CONTRÔLES ===",
    "ESPACE: Pause/Reprise",
    "R: Reset simulation",
    "F: Ajouter nourriture",
    "FLÈCHES: Vitesse simulation",
    "ÉCHAP: Quitter",
)


def main(argv: list[str] | None = None) -> int:
    """Run the simulator; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="ecosim", description="Interactive ecosystem simulation."
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    print("🎮Démarrage du Simulateur d'Écosystème")
    print("=======================================")

    engine = GameEngine(_TITLE, _WIDTH, _HEIGHT)
    try:
        engine.initialize()
    except WindowError as exc:
        print(f"❌Erreur: Impossible d'initialiser le moteur de jeu ({exc})", file=sys.stderr)
        return -1

    print("✅Moteur initialisé avec succès")
    print("🎯Lancement de la simulation...")
    for line in _CONTROLS:
        print(line)

    try:
        engine.run()
    finally:
        engine.shutdown()

    print("👋Simulation terminée. Au revoir !")
    return 0


if __name__ == "__main__":
    sys.exit(main())