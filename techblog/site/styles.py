"""Inline CSS used by the static site generator."""

CSS = r"""
:root {
  --bg: #ffffff;
  --fg: #111827;
  --muted: #4b5563;
  --border: #e5e7eb;
  --link: #2563eb;
  --chip-bg: #dbeafe;
  --chip-fg: #1e40af;
  --card-bg: #f3f4f6;
  --code-bg: #f3f4f6;
  --sans: "Geist", ui-sans-serif, system-ui, -apple-system, "Segoe UI", sans-serif;
  --mono: "Geist Mono", ui-monospace, "SF Mono", "Consolas", "Liberation Mono", monospace;
  --page-max: 80rem;
}

html.dark {
  --bg: #111827;
  --fg: #f3f4f6;
  --muted: #9ca3af;
  --border: #374151;
  --link: #60a5fa;
  --chip-bg: #1e3a8a;
  --chip-fg: #bfdbfe;
  --card-bg: #1f2937;
  --code-bg: #1f2937;
}

html { scroll-behavior: smooth; }

body {
  font-family: var(--sans);
  font-size: 16px;
  line-height: 1.7;
  margin: 0;
  background: var(--bg);
  color: var(--fg);
  transition: background-color 0.2s, color 0.2s;
  -webkit-font-smoothing: antialiased;
}

a { color: var(--link); text-decoration: none; }
a:hover { text-decoration: underline; text-underline-offset: 0.15em; }

.container { max-width: var(--page-max); margin: 0 auto; padding: 2rem 1rem 3rem; }
.container.narrow { max-width: 56rem; }

.theme-toggle {
  position: fixed;
  top: 1rem;
  right: 1rem;
  border: 1px solid var(--border);
  background: var(--card-bg);
  color: var(--fg);
  padding: 0.4rem 0.6rem;
  border-radius: 0.5rem;
  cursor: pointer;
}

.back { font-size: 14px; margin-bottom: 2rem; display: block; }

.layout { display: grid; grid-template-columns: 1fr; gap: 2rem; }
@media (min-width: 1024px) {
  .layout.with-toc { grid-template-columns: minmax(0, 1fr) 250px; }
}

.prose h1 { font-size: 2.25rem; line-height: 1.2; margin: 0 0 1rem; }
.prose h2 { font-size: 1.5rem; margin: 2.5rem 0 1rem; }
.prose h3 { font-size: 1.25rem; margin: 2rem 0 0.75rem; }
.scroll-mt { scroll-margin-top: 5rem; }
.prose img { width: 100%; height: auto; display: block; }

.muted { color: var(--muted); font-size: 14px; }

pre {
  overflow-x: auto;
  padding: 1rem;
  border-radius: 0.5rem;
  background: var(--code-bg);
  font-size: 14px;
}
code { font-family: var(--mono); }
p code, li code { background: var(--code-bg); padding: 0.1rem 0.3rem; border-radius: 0.25rem; }

table { border-collapse: collapse; width: 100%; margin: 1rem 0; }
th, td { border: 1px solid var(--border); padding: 0.4rem 0.6rem; vertical-align: top; }
th { text-align: left; }

blockquote {
  margin: 1rem 0;
  padding: 0 1rem;
  border-left: 3px solid var(--border);
  color: var(--muted);
}

hr { border: none; border-top: 1px solid var(--border); margin: 2rem 0; }

.toc { position: sticky; top: 5rem; font-size: 14px; }
.toc-title { font-weight: 600; margin: 0 0 0.5rem; }
.toc ol { list-style: none; margin: 0; padding: 0; border-left: 1px solid var(--border); }
.toc li { margin: 0; padding: 0.2rem 0 0.2rem 0; }
.toc li a, .toc li span { display: block; padding-left: 0.75rem; color: var(--muted); }
.toc li.active a { color: var(--link); font-weight: 600; border-left: 2px solid var(--link); margin-left: -1px; }

.post-card {
  display: block;
  padding: 1.5rem;
  margin-bottom: 1rem;
  border-radius: 0.5rem;
  background: var(--card-bg);
  color: var(--fg);
}
.post-card:hover { text-decoration: none; filter: brightness(0.97); }
.post-card h3 { margin: 0 0 0.5rem; font-size: 1.25rem; }
.post-card p { margin: 0 0 0.75rem; color: var(--muted); }
.chips { display: flex; gap: 0.5rem; flex-wrap: wrap; }
.chip { font-size: 12px; padding: 0.1rem 0.5rem; border-radius: 0.25rem; background: var(--chip-bg); color: var(--chip-fg); }

@media print {
  .theme-toggle, .toc { display: none; }
  body { background: #fff; color: #000; }
}
"""
