"""Layout and navbar component templates."""

from pathlib import Path

from vitekit.config import RunConfig
from vitekit.templates import Template, emit_templates, ensure_dirs

DEFAULT_LAYOUT = """import { Outlet } from "react-router-dom"
import Navbar from "../components/Navbar/Navbar"

const DefaultLayout = () => {
  return (
    <>
      <Navbar />
      <main>
        <Outlet />
      </main>
    </>
  )
}

export default DefaultLayout
"""

ADMIN_LAYOUT = """import { Outlet } from "react-router-dom"

export default function AdminLayout() {
  return (
    <div className="admin-layout">
      <aside>Admin Menu</aside>
      <main>
        <Outlet />
      </main>
    </div>
  )
}
"""

NAVBAR = """import { Link } from "react-router-dom"
import { ROUTES } from "../../constants/routes"
import styles from "./navbar.module.scss"

export default function Navbar() {
  return (
    <nav className={styles.navbar}>
      <ul>
        <li><Link to={ROUTES.HOME}>Accueil</Link></li>
      </ul>
    </nav>
  )
}
"""

NAVBAR_SCSS = """.navbar {
  padding: 1rem;
  background-color: #f5f5f5;
  border-bottom: 1px solid #ddd;

  ul {
    display: flex;
    gap: 1rem;
    list-style: none;
  }

  a {
    text-decoration: none;
    color: #333;
    font-weight: bold;

    &:hover {
      color: #007bff;
    }
  }
}
"""


def create_layouts(project_dir: Path, config: RunConfig) -> None:
    """Create src/layouts with the default layout (and admin layout)."""
    ensure_dirs(project_dir, "src/layouts")

    readme = f"""# 🖼️ Layouts

Ce dossier contient les layouts globaux (Header/Footer persistants, wrappers, etc.).

👉 Exemple : DefaultLayout.{config.ext}
"""
    templates = [
        Template("src/layouts/README.md", readme),
        Template(f"src/layouts/DefaultLayout.{config.ext}", DEFAULT_LAYOUT),
    ]
    if config.auth_guard:
        templates.append(Template(f"src/layouts/AdminLayout.{config.ext}", ADMIN_LAYOUT))

    emit_templates(project_dir, templates)


def create_navbar(project_dir: Path, config: RunConfig) -> None:
    """Create the Navbar component and its scoped stylesheet."""
    ensure_dirs(project_dir, "src/components/Navbar")
    emit_templates(project_dir, [
        Template(f"src/components/Navbar/Navbar.{config.ext}", NAVBAR),
        Template("src/components/Navbar/navbar.module.scss", NAVBAR_SCSS),
    ])
