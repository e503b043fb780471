"""Folder README templates and route constants."""

from pathlib import Path

from vitekit.config import RunConfig
from vitekit.templates import Template, emit_templates, ensure_dirs

FOLDER_READMES = {
    "components": """# 🧩 Components

Ce dossier contient tous les composants réutilisables de l'application.

👉 Exemple : Header, Button, Card, etc.
""",
    "hooks": """# 🪝 Hooks

Ce dossier contient vos hooks personnalisés React.

👉 Exemple : useDarkMode, useFetch, etc.
""",
    "assets": """# 🎨 Assets

Ici, vous pouvez stocker :
- Vos images
- Vos polices
- Vos icônes SVG ou autres
""",
    "services": """# 🛠️ Services

Ce dossier contient les services de l'application, comme les appels API ou les intégrations tierces.

👉 Exemple : AuthService, ApiService, etc.
""",
    "stores": """# 🏪 Stores

Ce dossier contient les stores de l'application, comme Redux ou Zustand.

👉 Exemple : UserStore, CartStore, etc.
""",
}


def create_folder_readmes(project_dir: Path, config: RunConfig) -> None:
    """Create the top-level src folders, each with a README."""
    src = project_dir / "src"
    ensure_dirs(src, *FOLDER_READMES)
    emit_templates(src, [
        Template(f"{folder}/README.md", readme)
        for folder, readme in FOLDER_READMES.items()
    ])


def create_routes_folder(project_dir: Path, config: RunConfig) -> None:
    """Create src/routes with its README."""
    ensure_dirs(project_dir, "src/routes")
    readme = """# 🧭 Dossier routes

📌 **Description :**
Centralise les routes de l'application.

- `index` : déclaration du routeur et des layouts
- `RequireAuth` : garde de route pour les pages protégées
"""
    emit_templates(project_dir, [Template("src/routes/README.md", readme)])


def _routes_constants(config: RunConfig) -> str:
    entries = [
        ("HOME", "/"),
        ("NOT_FOUND", "*"),
    ]
    if config.auth_guard:
        entries.insert(1, ("ADMIN", "/admin"))

    body = "\n".join(f"  {key}: '{path}'," for key, path in entries)
    suffix = " as const" if config.typescript else ""
    return f"""// Chemins de l'application, utilisés par src/routes/index.{config.ext}
export const ROUTES = {{
{body}
}}{suffix}
"""


def create_constants_and_utils(project_dir: Path, config: RunConfig) -> None:
    """Create src/constants (with the route map) and src/utils."""
    ensure_dirs(project_dir, "src/constants", "src/utils")

    constants_readme = """# 🧭 Constants

Ce dossier centralise toutes les constantes utilisées dans l'application :
- Routes
- Messages
- Clés de config
- Autres données statiques
"""
    utils_readme = """# 🧠 Utils

Ce dossier contient les fonctions utilitaires partagées dans l'application.
👉 Exemples : formatDate, isValidEmail, etc.
"""
    emit_templates(project_dir, [
        Template("src/constants/README.md", constants_readme),
        Template(f"src/constants/routes.{config.script_ext}", _routes_constants(config)),
        Template("src/utils/README.md", utils_readme),
    ])
