"""Project README templates."""

from pathlib import Path

from vitekit.config import RunConfig
from vitekit.templates import Template, emit_templates


def _stack_lines(config: RunConfig) -> str:
    lines = [
        "- React + TypeScript" if config.typescript else "- React",
        "- Vite",
        "- SCSS (architecture modulaire)",
    ]
    if config.tailwind:
        lines.append("- Tailwind CSS")
    lines += [
        "- React Router DOM",
        "- ESLint + Prettier",
    ]
    return "\n".join(lines)


def _readme(config: RunConfig) -> str:
    return f"""# 🚀 {config.project_name}

Projet généré automatiquement avec vitekit 💻

## 📦 Stack utilisée

{_stack_lines(config)}

---

## ▶️ Lancer le projet

```bash
npm install
npm run dev
```

---

## 📁 Structure du projet

```
src/
├── assets/          → Images, SVG, polices
├── components/      → Composants réutilisables
├── constants/       → Constantes globales (ex: routes)
├── hooks/           → Custom Hooks
├── layouts/         → Layouts globaux avec Header/Footer
├── pages/           → Pages principales (home, notfound…)
├── routes/          → Système de navigation
├── services/        → Appels API et intégrations
├── stores/          → État global
├── styles/          → SCSS avec variables, reset, mixins
├── utils/           → Fonctions utilitaires
```

---

## 🧹 Scripts disponibles

| Script          | Description                    |
|-----------------|--------------------------------|
| `npm run dev`   | Lance le serveur Vite          |
| `npm run build` | Build de production            |
| `npm run lint`  | Lint le projet avec ESLint     |

---

Voir `README-advanced.md` pour aller plus loin ✨
"""


def _advanced_readme(config: RunConfig) -> str:
    ext = config.ext
    script = config.script_ext
    return f"""# 🚀 {config.project_name} (Avancé)

Voici des outils et composants que vous pouvez ajouter au projet **à la demande**.
Rien n'est installé automatiquement, tout est prêt à être copié-collé.

---

## 🧠 1. Authentification globale avec Zustand + Persist

```bash
npm install zustand
```

Créer `src/stores/authStore.{script}` :

```js
import {{ create }} from 'zustand'
import {{ persist }} from 'zustand/middleware'

export const useAuthStore = create(
  persist(
    (set) => ({{
      user: null,
      hasHydrated: false,
      login: (data) => set({{ user: data }}),
      logout: () => set({{ user: null }}),
      setHasHydrated: (state) => set({{ hasHydrated: state }}),
    }}),
    {{
      name: 'auth-storage',
      onRehydrateStorage: () => (state) => {{
        state.setHasHydrated(true)
      }},
    }}
  )
)
```

---

## ⚙️ 2. API + axios

```bash
npm install axios
```

Créer `src/services/api.{script}` :

```js
import axios from 'axios'

const api = axios.create({{
  baseURL: import.meta.env.VITE_API_URL,
  headers: {{
    'Content-Type': 'application/json',
  }},
}})

export default api
```

`VITE_API_URL` est défini dans le fichier `.env`.

---

## 🔐 3. Protection de route avec RequireAuth

`src/routes/RequireAuth.{ext}` lit l'utilisateur dans `localStorage`.
Branchez-le sur le store Zustand :

```jsx
const user = useAuthStore((s) => s.user)
const hasHydrated = useAuthStore((s) => s.hasHydrated)
if (!hasHydrated) return null
```

---

## 🔁 4. React Query (data fetching + mutation)

```bash
npm install @tanstack/react-query
```

Créer `src/providers/QueryProvider.{ext}` :

```jsx
import {{ QueryClient, QueryClientProvider }} from '@tanstack/react-query'

const queryClient = new QueryClient()

export default function QueryProvider({{ children }}) {{
  return <QueryClientProvider client={{queryClient}}>{{children}}</QueryClientProvider>
}}
```

Puis envelopper `<AppRoutes />` dans `src/App.{ext}`.

---

## 📄 5. Documentation automatique avec JSDoc

```bash
npm install --save-dev jsdoc
```

Ajouter le script `"doc": "jsdoc -c jsdoc.json"` dans `package.json`, puis `npm run doc`.
"""


def generate_readme(project_dir: Path, config: RunConfig) -> None:
    """Write README.md and README-advanced.md at the project root."""
    emit_templates(project_dir, [
        Template("README.md", _readme(config)),
        Template("README-advanced.md", _advanced_readme(config)),
    ])
