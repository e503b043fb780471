"""SCSS style architecture templates."""

from pathlib import Path

from vitekit.config import RunConfig
from vitekit.templates import Template, emit_templates, ensure_dirs

STYLE_FOLDERS = ("base", "mixins", "variables")

RESET_SCSS = """/* Reset de base */
* {
  margin: 0;
  padding: 0;
  box-sizing: border-box;
}

/* Correction des tailles de police */
html {
  font-size: 16px;
  scroll-behavior: smooth;
}

/* Suppression du style des listes */
ul,
ol {
  list-style: none;
  padding: 0;
  margin: 0;
}

/* Suppression des styles par défaut des boutons et champs */
button,
input,
textarea {
  font-family: inherit;
  border: none;
  outline: none;
}

/* Suppression du soulignement des liens */
a {
  text-decoration: none;
  color: inherit;
}

/* Correction des images */
img {
  max-width: 100%;
  height: auto;
  display: block;
}
"""

COLORS_SCSS = """// 🎨 Couleurs globales

$primary-color: #007bff;
$secondary-color: #6c757d;
$text-color: #333;
$bg-color: #f5f5f5;
"""

THEME_SCSS = """// 🎨 Thème (ex : dark / light)

$light-theme: (
  background: #ffffff,
  text: #000000
);

$dark-theme: (
  background: #121212,
  text: #f5f5f5
);

// Mixin pour appliquer un thème
@mixin theme($theme) {
  background-color: map-get($theme, background);
  color: map-get($theme, text);
}
"""

MEDIA_SCSS = """// 📱 Mixin media query

@mixin respond-to($breakpoint) {
  @if $breakpoint == small {
    @media (max-width: 576px) { @content; }
  } @else if $breakpoint == medium {
    @media (max-width: 768px) { @content; }
  } @else if $breakpoint == large {
    @media (max-width: 992px) { @content; }
  }
}
"""

GLOBAL_SCSS = """@use "./variables/colors";
@use "./mixins/media";
@use "./base/reset";

/* Ajoutez ici vos styles globaux */
body {
  color: colors.$text-color;
  background-color: colors.$bg-color;
}
"""


def create_styles_folder(project_dir: Path, config: RunConfig) -> None:
    """Create src/styles with base, mixins and variables partials."""
    styles = project_dir / "src" / "styles"
    ensure_dirs(styles, *STYLE_FOLDERS)

    emit_templates(styles, [
        Template("base/_reset.scss", RESET_SCSS),
        Template("variables/_colors.scss", COLORS_SCSS),
        Template("variables/_theme.scss", THEME_SCSS),
        Template("mixins/_media.scss", MEDIA_SCSS),
        Template("global.scss", GLOBAL_SCSS),
    ])
