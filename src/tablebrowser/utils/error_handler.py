"""
Data Access Error Handler - User-friendly database error messages

Translates cryptic SQLite error messages into user-friendly messages
with suggestions for resolution.
"""

import re
from dataclasses import dataclass

import logging
logger = logging.getLogger(__name__)


@dataclass
class DataAccessErrorInfo:
    """Structured data access error information."""
    title: str  # Short error title
    message: str  # User-friendly message
    suggestion: str  # What to do to fix it
    original_error: str  # Original error for debugging

    def format_short(self) -> str:
        """Format short error message."""
        return f"{self.title}: {self.message}"


# Format: (regex_pattern, title, message_template, suggestion)
# Use {match} in message_template to include regex group(1)

SQLITE_PATTERNS = [
    # File not found
    (
        r"(?:unable to open|no such file)",
        "Fichier introuvable",
        "Le fichier de base de données SQLite n'existe pas ou n'est pas lisible.",
        "Vérifiez le chemin du fichier .db ou .sqlite."
    ),
    # Database locked
    (
        r"database is locked",
        "Base de données verrouillée",
        "La base de données est utilisée par un autre processus.",
        "Fermez les autres applications utilisant ce fichier, ou attendez quelques instants."
    ),
    # Read-only
    (
        r"(?:read-only|readonly)",
        "Lecture seule",
        "La base de données est en lecture seule.",
        "Vérifiez les permissions du fichier ou du dossier parent."
    ),
    # Corrupt database
    (
        r"(?:corrupt|malformed|not a database)",
        "Base de données corrompue",
        "Le fichier de base de données semble corrompu.",
        "Essayez de restaurer une sauvegarde ou utilisez 'PRAGMA integrity_check'."
    ),
    # Missing table
    (
        r"no such table: ([\w.]+)",
        "Table inexistante",
        "La table '{match}' n'existe pas dans cette base.",
        "Rechargez le schéma de la base de données."
    ),
    # Missing column (stale sort column)
    (
        r"no such column: ([\w.]+)",
        "Colonne inexistante",
        "La colonne '{match}' n'existe pas.",
        "Réinitialisez le tri de la table."
    ),
    # Syntax error
    (
        r"syntax error",
        "Erreur de syntaxe",
        "La requête générée est invalide.",
        "Vérifiez le nom de la table et des colonnes."
    ),
]


def parse_data_access_error(error: Exception) -> DataAccessErrorInfo:
    """
    Parse a database error and return user-friendly information.

    Args:
        error: The exception that occurred

    Returns:
        DataAccessErrorInfo with user-friendly message and suggestion
    """
    original_error = str(error)

    for pattern, title, message_template, suggestion in SQLITE_PATTERNS:
        match = re.search(pattern, original_error, re.IGNORECASE)
        if match:
            # Replace {match} with captured group if present
            message = message_template
            if "{match}" in message and match.groups():
                message = message.replace("{match}", match.group(1))

            return DataAccessErrorInfo(
                title=title,
                message=message,
                suggestion=suggestion,
                original_error=original_error
            )

    # No pattern matched - return generic error
    return DataAccessErrorInfo(
        title="Erreur d'accès aux données",
        message="Une erreur est survenue lors de la lecture de la base de données.",
        suggestion="Vérifiez le fichier de base de données et réessayez.",
        original_error=original_error
    )

