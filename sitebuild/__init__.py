"""Build step that injects deployment settings into the static sign-in page."""
