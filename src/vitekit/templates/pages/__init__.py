"""Page, routing and App templates.

Import paths between these files are fixed: the route index imports
../constants/routes, ../layouts/DefaultLayout, ../pages/home/Home and
../pages/notfound/NotFound, and App imports ./routes.
"""

from pathlib import Path

from vitekit.config import RunConfig
from vitekit.templates import Template, emit_templates, ensure_dirs

HOME_SCSS = """.title {
  font-size: 2rem;
}
"""

NOT_FOUND = """import styles from "./notfound.module.scss"

export default function NotFound() {
  return (
    <div className={styles.wrapper}>
      <h1>404</h1>
      <p>Cette page n'existe pas.</p>
    </div>
  )
}
"""

NOT_FOUND_SCSS = """.wrapper {
  text-align: center;
  padding: 5rem;
  color: #999;

  h1 {
    font-size: 6rem;
    margin-bottom: 1rem;
  }

  p {
    font-size: 1.25rem;
  }
}
"""

APP = """import AppRoutes from "./routes"

function App() {
  return <AppRoutes />
}

export default App
"""


def _home(project_name: str) -> str:
    return f"""import styles from "./home.module.scss"

export default function Home() {{
  return <h1 className={{styles.title}}>Homepage: Commencez "{project_name}"</h1>
}}
"""


def _routes_index(config: RunConfig) -> str:
    imports = [
        "import { BrowserRouter, Routes, Route } from 'react-router-dom'",
        "import { ROUTES } from '../constants/routes'",
        "import DefaultLayout from '../layouts/DefaultLayout'",
    ]
    if config.auth_guard:
        imports.append("import AdminLayout from '../layouts/AdminLayout'")
        imports.append("import RequireAuth from './RequireAuth'")
    imports += [
        "import Home from '../pages/home/Home'",
        "import NotFound from '../pages/notfound/NotFound'",
    ]

    admin = ""
    if config.auth_guard:
        admin = """        <Route
          path={ROUTES.ADMIN}
          element={
            <RequireAuth role="admin">
              <AdminLayout />
            </RequireAuth>
          }
        />
"""

    return "\n".join(imports) + f"""

const AppRoutes = () => {{
  return (
    <BrowserRouter>
      <Routes>
        <Route element={{<DefaultLayout />}}>
          <Route path={{ROUTES.HOME}} element={{<Home />}} />
          <Route path={{ROUTES.NOT_FOUND}} element={{<NotFound />}} />
        </Route>
{admin}      </Routes>
    </BrowserRouter>
  )
}}

export default AppRoutes
"""


def _require_auth(config: RunConfig) -> str:
    if config.typescript:
        return """import type { ReactNode } from 'react'
import { Navigate, useLocation } from 'react-router-dom'

type User = {
  role?: string
}

type RequireAuthProps = {
  children: ReactNode
  role?: string
}

// Simule un user connecté, à remplacer par votre vrai système d'auth
const useAuth = (): User | null => {
  return JSON.parse(localStorage.getItem('user') ?? 'null')
}

export default function RequireAuth({ children, role }: RequireAuthProps) {
  const user = useAuth()
  const location = useLocation()

  if (!user) {
    return <Navigate to="/login" state={{ from: location }} replace />
  }

  // Vérifie un rôle spécifique si demandé
  if (role && user.role !== role) {
    return <Navigate to="/unauthorized" replace />
  }

  return <>{children}</>
}
"""
    return """import { Navigate, useLocation } from 'react-router-dom'

// Simule un user connecté, à remplacer par votre vrai système d'auth
const useAuth = () => {
  return JSON.parse(localStorage.getItem('user') ?? 'null')
}

export default function RequireAuth({ children, role }) {
  const user = useAuth()
  const location = useLocation()

  if (!user) {
    return <Navigate to="/login" state={{ from: location }} replace />
  }

  // Vérifie un rôle spécifique si demandé
  if (role && user.role !== role) {
    return <Navigate to="/unauthorized" replace />
  }

  return children
}
"""


def create_not_found_page(project_dir: Path, config: RunConfig) -> None:
    """Create the 404 page."""
    ensure_dirs(project_dir, "src/pages/notfound")
    emit_templates(project_dir, [
        Template(f"src/pages/notfound/NotFound.{config.ext}", NOT_FOUND),
        Template("src/pages/notfound/notfound.module.scss", NOT_FOUND_SCSS),
    ])


def create_pages_and_routing(project_dir: Path, config: RunConfig) -> None:
    """Create the home page and the router under src/routes."""
    ensure_dirs(project_dir, "src/pages/home", "src/routes")

    templates = [
        Template(f"src/pages/home/Home.{config.ext}", _home(config.project_name)),
        Template("src/pages/home/home.module.scss", HOME_SCSS),
        Template(f"src/routes/index.{config.ext}", _routes_index(config)),
    ]
    if config.auth_guard:
        templates.append(Template(f"src/routes/RequireAuth.{config.ext}", _require_auth(config)))

    emit_templates(project_dir, templates)


def write_app_file(project_dir: Path, config: RunConfig) -> None:
    """Replace the Vite App component with one that renders the router."""
    emit_templates(project_dir, [Template(f"src/App.{config.ext}", APP)])
