"""Service layer: orchestration of the engine for the CLI.

Services take plain configuration dicts and return result objects; they do
not print.
"""
