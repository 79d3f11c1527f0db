"""Constantes partagées pour l'application."""

# Valeur sentinelle des filtres (« pas de contrainte »)
FILTER_ALL = "all"

# Valeurs admises pour les champs énumérés d'un challenge
STATUSES = ("active", "pending", "completed")
DIFFICULTIES = ("easy", "medium", "hard")
PRIORITIES = ("low", "medium", "high")

# Rangs de tri (ordre croissant)
STATUS_RANK = {"active": 1, "pending": 2, "completed": 3}
DIFFICULTY_RANK = {"easy": 1, "medium": 2, "hard": 3}
PRIORITY_RANK = {"low": 1, "medium": 2, "high": 3}

# Format d'affichage des dates : "Jan 5, 2025"
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Tableau de progression journalier
PROGRESS_TABLE_HEADER = ["Day", "Date", "Completed", "Notes", "Status"]
PROGRESS_DONE_MARK = "✅"
PROGRESS_TODO_MARK = "⏳"
PROGRESS_DONE_NOTE = "Completed successfully"
EXPORT_FORMATS = ("xlsx", "csv")
