"""
SVG logo synthesis for README headers.

A project name (and optional description) is matched against a keyword theme
table; the winning theme picks one of five SVG templates, two colours and an icon.
Output depends only on the inputs.
"""

import html
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

LOGO_STYLES = ('modern', 'minimal', 'gradient', 'tech', 'creative')

DEFAULT_PRIMARY = '#4F46E5'
DEFAULT_SECONDARY = '#7C3AED'


@dataclass(frozen=True)
class Theme:
    name: str
    keywords: Sequence[str]
    style: str
    primary: str
    secondary: str
    icon: Optional[str] = None


@dataclass
class LogoStyle:
    """Inputs for one rendered logo."""
    project_name: str
    primary_color: str = DEFAULT_PRIMARY
    secondary_color: str = DEFAULT_SECONDARY
    style: str = 'modern'
    icon: Optional[str] = None
    width: int = 200
    height: int = 80


# 18x18 icons drawn in white with #333 details
CHAT_ICON = (
    '<path d="M8 12l-4-4 4-4m8 8l4-4-4-4" stroke="white" stroke-width="2" fill="none"/>'
    '<circle cx="15" cy="8" r="2" fill="white"/>'
)
DASHBOARD_ICON = (
    '<rect x="2" y="2" width="6" height="6" fill="white" rx="1"/>'
    '<rect x="10" y="2" width="6" height="6" fill="white" rx="1"/>'
    '<rect x="2" y="10" width="6" height="6" fill="white" rx="1"/>'
    '<rect x="10" y="10" width="6" height="6" fill="white" rx="1"/>'
)
BLOG_ICON = (
    '<rect x="3" y="2" width="12" height="16" fill="white" rx="2"/>'
    '<line x1="6" y1="6" x2="12" y2="6" stroke="#333" stroke-width="1"/>'
    '<line x1="6" y1="9" x2="14" y2="9" stroke="#333" stroke-width="1"/>'
    '<line x1="6" y1="12" x2="11" y2="12" stroke="#333" stroke-width="1"/>'
)
MUSIC_ICON = (
    '<circle cx="9" cy="9" r="7" fill="white"/>'
    '<circle cx="9" cy="9" r="3" fill="#333"/>'
    '<path d="M15 6.5v8a2.5 2.5 0 0 1-2.5 2.5" stroke="#333" stroke-width="1.5" fill="none"/>'
)
PHOTO_ICON = (
    '<rect x="2" y="3" width="14" height="12" fill="white" rx="2"/>'
    '<circle cx="8.5" cy="8.5" r="2.5" fill="#333"/>'
    '<path d="M14.5 14L12 11.5 8.5 15 6 12.5 2.5 16" stroke="#333" stroke-width="1" fill="none"/>'
)
SHOPPING_ICON = (
    '<path d="M6 2L3 6v10a2 2 0 0 0 2 2h8a2 2 0 0 0 2-2V6l-3-4z" fill="white"/>'
    '<line x1="3" y1="6" x2="15" y2="6" stroke="#333" stroke-width="1"/>'
    '<path d="M7 10v4" stroke="#333" stroke-width="1"/>'
    '<path d="M11 10v4" stroke="#333" stroke-width="1"/>'
)
TASK_ICON = (
    '<rect x="3" y="2" width="12" height="16" fill="white" rx="2"/>'
    '<path d="M6 10l2 2 4-4" stroke="#333" stroke-width="1.5" fill="none"/>'
    '<line x1="6" y1="6" x2="12" y2="6" stroke="#333" stroke-width="1"/>'
    '<line x1="6" y1="14" x2="10" y2="14" stroke="#333" stroke-width="1"/>'
)
API_ICON = (
    '<path d="M12 15l5-6-5-6" stroke="white" stroke-width="2" fill="none"/>'
    '<path d="M6 3l-5 6 5 6" stroke="white" stroke-width="2" fill="none"/>'
)
GAME_ICON = (
    '<rect x="1" y="5" width="16" height="8" fill="white" rx="3"/>'
    '<circle cx="5" cy="9" r="1.5" fill="#333"/>'
    '<circle cx="12" cy="8" r="1" fill="#333"/>'
    '<circle cx="14" cy="10" r="1" fill="#333"/>'
)

# Priority order: ties go to the earlier theme
THEMES: Sequence[Theme] = (
    Theme('chat', ('chat', 'message', 'talk', 'messenger', 'social', 'community'),
          'creative', '#10B981', '#3B82F6', CHAT_ICON),
    Theme('dashboard', ('dashboard', 'admin', 'panel', 'analytics', 'monitor'),
          'minimal', '#1F2937', '#6B7280', DASHBOARD_ICON),
    Theme('blog', ('blog', 'news', 'article', 'post', 'journal'),
          'modern', '#F59E0B', '#EF4444', BLOG_ICON),
    Theme('music', ('music', 'audio', 'sound', 'song', 'playlist'),
          'gradient', '#8B5CF6', '#EC4899', MUSIC_ICON),
    Theme('photo', ('photo', 'image', 'gallery', 'camera', 'picture'),
          'creative', '#06B6D4', '#8B5CF6', PHOTO_ICON),
    Theme('shopping', ('shop', 'store', 'cart', 'buy', 'commerce', 'retail'),
          'gradient', '#F59E0B', '#EF4444', SHOPPING_ICON),
    Theme('task', ('task', 'todo', 'manage', 'organize', 'schedule', 'productivity'),
          'modern', '#6366F1', '#8B5CF6', TASK_ICON),
    Theme('api', ('api', 'code', 'dev', 'sdk', 'server', 'backend'),
          'tech', '#4F46E5', '#7C3AED', API_ICON),
    Theme('game', ('game', 'gaming', 'play', 'arcade', 'quest', 'rpg'),
          'gradient', '#9B59B6', '#E74C3C', GAME_ICON),
)

DEFAULT_THEME = Theme('tech', (), 'tech', DEFAULT_PRIMARY, DEFAULT_SECONDARY)

# project type fragment -> (style, primary, secondary); used when no theme matched
LANGUAGE_PALETTES = (
    (('React', 'Next.js'), ('tech', '#61DAFB', '#21232A')),
    (('Vue',), ('gradient', '#4FC08D', '#34495E')),
    (('Python', 'Django', 'Flask'), ('tech', '#3776AB', '#FFD43B')),
    (('Rust',), ('tech', '#CE422B', '#000000')),
    (('Go ',), ('minimal', '#00ADD8', '#34495E')),
)

WORD_SPLIT = re.compile(r'[\s\-_]+')


def _words(text: Optional[str], pattern=WORD_SPLIT) -> List[str]:
    if not text:
        return []
    return [word for word in pattern.split(text.lower()) if word]


def get_initials(project_name: str) -> str:
    """Upper-cased first letters of the first two words of the name."""
    words = [word for word in WORD_SPLIT.split(project_name or '') if word]
    return ''.join(word[0].upper() for word in words[:2])


def select_theme(project_name: str, description: Optional[str] = None) -> Theme:
    """Pick the theme with the most keyword matches, or the default tech theme."""
    tokens = _words(project_name) + _words(description, re.compile(r'\s+'))

    best, best_matches = DEFAULT_THEME, 0
    for theme in THEMES:
        matches = sum(1 for keyword in theme.keywords if any(keyword in token for token in tokens))
        if matches > best_matches:
            best, best_matches = theme, matches
    return best


def adjust_color(color: str, amount: int) -> str:
    """Lighten (positive amount) or darken (negative amount) a #RRGGBB colour."""
    num = int(color.lstrip('#'), 16)
    r = max(0, min(255, (num >> 16) + amount))
    g = max(0, min(255, ((num >> 8) & 0xFF) + amount))
    b = max(0, min(255, (num & 0xFF) + amount))
    return f"#{(r << 16) | (g << 8) | b:06x}"


def _svg(width: int, height: int, body: str) -> str:
    return (
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg">\n{body}\n</svg>'
    )


def _modern(name, initials, logo: LogoStyle) -> str:
    color = logo.primary_color
    if logo.icon:
        mark = f'  <g transform="translate(31, 31)">{logo.icon}</g>'
    else:
        mark = (f'  <text x="40" y="48" font-family="Arial, sans-serif" font-size="20" font-weight="bold" '
                f'text-anchor="middle" fill="white">{initials}</text>')
    return _svg(logo.width, logo.height, "\n".join([
        '  <defs>',
        '    <linearGradient id="modernGrad" x1="0%" y1="0%" x2="100%" y2="100%">',
        f'      <stop offset="0%" style="stop-color:{color};stop-opacity:1" />',
        f'      <stop offset="100%" style="stop-color:{adjust_color(color, -20)};stop-opacity:1" />',
        '    </linearGradient>',
        '    <filter id="shadow" x="-20%" y="-20%" width="140%" height="140%">',
        f'      <feDropShadow dx="2" dy="2" stdDeviation="3" flood-color="{color}" flood-opacity="0.3"/>',
        '    </filter>',
        '  </defs>',
        '  <circle cx="40" cy="40" r="30" fill="url(#modernGrad)" filter="url(#shadow)"/>',
        mark,
        f'  <text x="85" y="38" font-family="Arial, sans-serif" font-size="16" font-weight="600" fill="{color}">{name}</text>',
        '  <text x="85" y="53" font-family="Arial, sans-serif" font-size="10" fill="#666">Modern Solution</text>',
    ]))


def _minimal(name, initials, logo: LogoStyle) -> str:
    color = logo.primary_color
    return _svg(logo.width, logo.height, "\n".join([
        f'  <rect x="5" y="20" width="50" height="40" rx="8" fill="none" stroke="{color}" stroke-width="2"/>',
        f'  <text x="30" y="46" font-family="Arial, sans-serif" font-size="18" font-weight="300" '
        f'text-anchor="middle" fill="{color}">{initials}</text>',
        f'  <text x="70" y="46" font-family="Arial, sans-serif" font-size="18" font-weight="300" fill="{color}">{name}</text>',
    ]))


def _gradient(name, initials, logo: LogoStyle) -> str:
    primary, secondary = logo.primary_color, logo.secondary_color
    return _svg(logo.width, logo.height, "\n".join([
        '  <defs>',
        '    <linearGradient id="gradientBg" x1="0%" y1="0%" x2="100%" y2="100%">',
        f'      <stop offset="0%" style="stop-color:{primary};stop-opacity:1" />',
        f'      <stop offset="50%" style="stop-color:{secondary};stop-opacity:1" />',
        f'      <stop offset="100%" style="stop-color:{adjust_color(primary, 30)};stop-opacity:1" />',
        '    </linearGradient>',
        '    <linearGradient id="textGrad" x1="0%" y1="0%" x2="100%" y2="0%">',
        f'      <stop offset="0%" style="stop-color:{primary};stop-opacity:1" />',
        f'      <stop offset="100%" style="stop-color:{secondary};stop-opacity:1" />',
        '    </linearGradient>',
        '  </defs>',
        '  <path d="M10 20 L60 10 L70 50 L20 60 Z" fill="url(#gradientBg)" opacity="0.9"/>',
        '  <text x="40" y="41" font-family="Arial, sans-serif" font-size="16" font-weight="bold" '
        f'text-anchor="middle" fill="white">{initials}</text>',
        f'  <text x="85" y="42" font-family="Arial, sans-serif" font-size="20" font-weight="bold" fill="url(#textGrad)">{name}</text>',
    ]))


def _tech(name, initials, logo: LogoStyle) -> str:
    color = logo.primary_color
    if logo.icon:
        mark = f'  <g transform="translate(31, 26) scale(0.5)">{logo.icon.replace("#333", color)}</g>'
    else:
        mark = (f'  <text x="40" y="39" font-family="Courier, monospace" font-size="10" font-weight="bold" '
                f'text-anchor="middle" fill="white">{initials}</text>')
    return _svg(logo.width, logo.height, "\n".join([
        '  <defs>',
        '    <pattern id="grid" width="10" height="10" patternUnits="userSpaceOnUse">',
        f'      <path d="M 10 0 L 0 0 0 10" fill="none" stroke="{color}" stroke-width="0.5" opacity="0.3"/>',
        '    </pattern>',
        '  </defs>',
        f'  <rect width="{logo.width}" height="{logo.height}" fill="url(#grid)"/>',
        f'  <polygon points="30,15 50,15 60,35 50,55 30,55 20,35" fill="{color}" opacity="0.1" '
        f'stroke="{color}" stroke-width="2"/>',
        f'  <circle cx="40" cy="35" r="12" fill="{color}"/>',
        mark,
        f'  <text x="75" y="32" font-family="Courier, monospace" font-size="14" font-weight="bold" fill="{color}">{name}</text>',
        '  <text x="75" y="47" font-family="Courier, monospace" font-size="8" fill="#666">&lt;/&gt; TECH</text>',
    ]))


def _creative(name, initials, logo: LogoStyle) -> str:
    primary, secondary = logo.primary_color, logo.secondary_color
    return _svg(logo.width, logo.height, "\n".join([
        '  <defs>',
        '    <radialGradient id="creativeGrad" cx="50%" cy="50%" r="50%">',
        f'      <stop offset="0%" style="stop-color:{primary};stop-opacity:0.8" />',
        f'      <stop offset="70%" style="stop-color:{secondary};stop-opacity:0.6" />',
        f'      <stop offset="100%" style="stop-color:{adjust_color(primary, 40)};stop-opacity:0.4" />',
        '    </radialGradient>',
        '  </defs>',
        f'  <circle cx="25" cy="25" r="15" fill="{primary}" opacity="0.7"/>',
        f'  <circle cx="45" cy="35" r="12" fill="{secondary}" opacity="0.6"/>',
        f'  <circle cx="35" cy="50" r="10" fill="{adjust_color(primary, 30)}" opacity="0.5"/>',
        '  <circle cx="35" cy="35" r="18" fill="url(#creativeGrad)"/>',
        '  <text x="35" y="42" font-family="Arial, sans-serif" font-size="14" font-weight="bold" '
        f'text-anchor="middle" fill="white">{initials}</text>',
        f'  <text x="70" y="32" font-family="Arial, sans-serif" font-size="16" font-weight="600" fill="{primary}">{name}</text>',
        f'  <text x="70" y="47" font-family="Arial, sans-serif" font-size="10" fill="{secondary}">Creative Solutions</text>',
    ]))


RENDERERS = {
    'modern': _modern,
    'minimal': _minimal,
    'gradient': _gradient,
    'tech': _tech,
    'creative': _creative,
}


def generate_svg_logo(logo: LogoStyle) -> str:
    """Render a logo with one of the five templates (unknown styles render as modern)."""
    name = html.escape(logo.project_name)
    initials = html.escape(get_initials(logo.project_name))
    renderer = RENDERERS.get(logo.style, _modern)
    return renderer(name, initials, logo)


def generate_logo(project_name: str, description: Optional[str] = None,
                  project_type: Optional[str] = None) -> str:
    """
    Generate an inline SVG logo for a project.

    Args:
        project_name: Repository or project name
        description: Optional description, tokenized on whitespace
        project_type: Optional analyzer project type, used for the palette
            when no keyword theme matches

    Returns:
        SVG markup
    """
    theme = select_theme(project_name, description)
    style, primary, secondary = theme.style, theme.primary, theme.secondary

    if theme is DEFAULT_THEME and project_type:
        for fragments, palette in LANGUAGE_PALETTES:
            if any(fragment in f"{project_type} " for fragment in fragments):
                style, primary, secondary = palette
                break

    return generate_svg_logo(LogoStyle(
        project_name=project_name,
        primary_color=primary,
        secondary_color=secondary,
        style=style,
        icon=theme.icon,
    ))
