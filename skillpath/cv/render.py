from __future__ import annotations

from html import escape

from skillpath.schemas.cv import CVData

_CV_STYLE = """
    body { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 40px; }
    h1 { color: #0ea5e9; margin-bottom: 5px; }
    h2 { color: #334155; border-bottom: 2px solid #0ea5e9; padding-bottom: 5px; margin-top: 25px; }
    .contact { color: #64748b; margin-bottom: 20px; }
    .section { margin-bottom: 20px; }
    .skill-tag { display: inline-block; background: #f0f9ff; padding: 4px 12px; margin: 2px; border-radius: 20px; font-size: 12px; }
    .project { margin-bottom: 10px; padding-left: 15px; border-left: 3px solid #0ea5e9; }
"""


def _section(title: str, body: str) -> str:
    return f'<div class="section"><h2>{escape(title)}</h2>{body}</div>'


def render_cv_html(cv: CVData) -> str:
    """Printable CV document. Projects and experience appear only when present."""
    skills = " ".join(f'<span class="skill-tag">{escape(skill)}</span>' for skill in cv.skills)
    sections = [
        _section("Professional Summary", f"<p>{escape(cv.summary)}</p>"),
        _section("Education", f"<p>{escape(cv.education)}</p>"),
        _section("Skills", skills),
    ]
    if cv.projects:
        projects = "".join(f'<div class="project">{escape(project)}</div>' for project in cv.projects)
        sections.append(_section("Projects", projects))
    if cv.experience:
        sections.append(_section("Experience", f"<p>{escape(cv.experience)}</p>"))

    name = escape(cv.name)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8" />\n'
        f"<title>{name} - CV</title>\n"
        f"<style>{_CV_STYLE}</style>\n"
        "</head>\n"
        "<body>\n"
        f"<h1>{name}</h1>\n"
        f'<div class="contact">{escape(cv.email)} | {escape(cv.phone)}</div>\n'
        + "\n".join(sections)
        + "\n</body>\n</html>\n"
    )
