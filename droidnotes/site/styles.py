"""Inline CSS used by the static site generator."""

CSS = r"""
:root {
  --bg: #f8f8f8;
  --fg: #1a1a1a;
  --muted: #6a6a6a;
  --border: #e3e3e3;
  --card: #ffffff;
  --primary: #3ddc84;
  --primary-fg: #073042;
  --code-bg: #f1f1f1;
  --sidebar-w: 260px;
  --page-max: 1200px;
}

:root[data-theme="dark"] {
  --bg: #0f1115;
  --fg: #e6e6e6;
  --muted: #9a9a9a;
  --border: #2a2d34;
  --card: #171a21;
  --code-bg: #1d2129;
}

@media (prefers-color-scheme: dark) {
  :root:not([data-theme="light"]) {
    --bg: #0f1115;
    --fg: #e6e6e6;
    --muted: #9a9a9a;
    --border: #2a2d34;
    --card: #171a21;
    --code-bg: #1d2129;
  }
}

html, body { min-height: 100%; }

body.layout {
  display: flex;
  flex-direction: column;
  min-height: 100vh;
  margin: 0;
  font-size: 15px;
  line-height: 1.6;
  background: var(--bg);
  color: var(--fg);
  -webkit-font-smoothing: antialiased;
}

a { color: inherit; text-decoration: none; }
a:hover { text-decoration: underline; text-underline-offset: 0.15em; }

.topbar {
  display: flex;
  justify-content: space-between;
  align-items: center;
  gap: 1rem;
  padding: 0.75rem 1.5rem;
  border-bottom: 1px solid var(--border);
}
.topbar nav a { margin-left: 1rem; color: var(--muted); font-size: 13px; }
.theme-toggle {
  border: 1px solid var(--border);
  background: transparent;
  color: var(--fg);
  padding: 0.2rem 0.6rem;
  cursor: pointer;
  font: inherit;
  font-size: 13px;
}

main.home { display: flex; flex: 1; flex-direction: column; justify-content: center; text-align: center; }
.hero { padding: 5rem 1.5rem; }
.hero h1 { font-size: 4.5rem; font-weight: 800; color: var(--primary); margin: 0 0 1rem 0; line-height: 1.1; }
.hero p { font-size: 1.25rem; color: var(--muted); margin: 0 0 1.5rem 0; }
.cta {
  display: inline-block;
  margin-top: 1.25rem;
  padding: 0.75rem 2rem;
  border-radius: 0.5rem;
  font-size: 1.1rem;
  background: var(--primary-fg);
  color: #fff;
  transition: all 0.2s;
}
.cta:hover { background: var(--primary); color: var(--primary-fg); text-decoration: none; }

#features { padding: 4rem 1.5rem; }
.cards {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(260px, 1fr));
  gap: 1rem;
  max-width: var(--page-max);
  margin: 0 auto;
  text-align: left;
}
.card { border: 1px solid var(--border); background: var(--card); border-radius: 0.5rem; padding: 1rem; }
.card-icon { font-size: 1.5rem; }
.card h3 { margin: 0.5rem 0 0.25rem 0; font-size: 15px; }
.card p { margin: 0; color: var(--muted); font-size: 14px; }

.docs { display: flex; flex: 1; max-width: var(--page-max); width: 100%; margin: 0 auto; }
.sidebar {
  width: var(--sidebar-w);
  flex-shrink: 0;
  padding: 1.5rem 1rem;
  border-right: 1px solid var(--border);
  font-size: 14px;
}
.sidebar h4 { margin: 1rem 0 0.25rem 0; font-size: 12px; color: var(--muted); text-transform: uppercase; }
.sidebar ul { list-style: none; padding-left: 0; margin: 0; }
.sidebar li { margin: 0.2rem 0; }
.sidebar a.active { color: var(--primary); font-weight: 600; }
article { flex: 1; min-width: 0; padding: 1.5rem 2rem 3rem; }
.toc { width: 200px; flex-shrink: 0; padding: 1.5rem 1rem; font-size: 13px; }
.toc ul { list-style: none; padding-left: 0; }
.toc li.depth-3 { padding-left: 0.75rem; }

h1, h2, h3 { font-weight: 600; }
.muted { color: var(--muted); }
.rule { border-top: 1px solid var(--border); margin: 1.25rem 0; }
.pager { display: flex; justify-content: space-between; gap: 1rem; margin-top: 2rem; }
.pager a { border: 1px solid var(--border); padding: 0.5rem 0.75rem; border-radius: 0.5rem; }

table { border-collapse: collapse; width: 100%; margin: 0.75rem 0; }
th, td { border: 1px solid var(--border); padding: 0.35rem 0.5rem; vertical-align: top; }
th { text-align: left; color: var(--muted); font-weight: 600; }

pre {
  white-space: pre-wrap;
  word-break: break-word;
  margin: 0.75rem 0;
  padding: 0.5rem 0.75rem;
  border: 1px solid var(--border);
  background: var(--code-bg);
}

code { font-family: var(--fira-code), monospace; }
p code, li code { background: var(--code-bg); padding: 0.1rem 0.25rem; }
img { max-width: 100%; }

blockquote {
  margin: 0.75rem 0;
  padding: 0 0.75rem;
  border-left: 2px solid var(--border);
  color: var(--muted);
}

hr { border: none; border-top: 1px solid var(--border); margin: 1rem 0; }

@media (max-width: 900px) {
  .toc { display: none; }
}

@media (max-width: 700px) {
  .docs { flex-direction: column; }
  .sidebar { width: auto; border-right: none; border-bottom: 1px solid var(--border); }
  .hero h1 { font-size: 2.75rem; }
}
"""
