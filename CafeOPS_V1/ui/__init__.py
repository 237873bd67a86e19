"""Affichage console (impressions formatées des résultats de jeu)."""
