"""Catalogue, selection, submission and the seeder run."""
