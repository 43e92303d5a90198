"""Inline CSS used by rendered pages."""

CSS = r"""
:root {
  --bg: #fdfdfd;
  --fg: #1f2428;
  --muted: #6a737d;
  --border: #e1e4e8;
  --link: #1184ce;
  --sans: -apple-system, "Segoe UI", Helvetica, Arial, sans-serif;
  --mono: ui-monospace, "SF Mono", "Consolas", "Liberation Mono", monospace;
}

* { box-sizing: border-box; }

body {
  font-family: var(--sans);
  font-size: 16px;
  line-height: 1.6;
  margin: 0;
  padding: 0;
  background: var(--bg);
  color: var(--fg);
  -webkit-font-smoothing: antialiased;
}

a { color: var(--link); text-decoration: none; }
a:hover { text-decoration: underline; text-underline-offset: 0.15em; }

.stack { display: flex; flex-direction: column; margin: 0 auto; }
.stack.header {
  border-bottom: 1px solid var(--border);
  padding: 1.5rem 0 0.75rem;
  margin-bottom: 1.5rem;
}
.stack.header a { color: var(--muted); font-size: 14px; }
.stack > img { display: block; }

h1 { margin: 0 0 0.5rem 0; font-size: 24px; font-weight: 600; }
h2 { font-size: 20px; font-weight: 600; }
h3 { font-size: 17px; font-weight: 600; }

.muted { color: var(--muted); font-size: 14px; }

ul { margin: 0.75rem 0; padding-left: 1.25rem; }
li { margin: 0.35rem 0; }

table { border-collapse: collapse; width: 100%; margin: 0.75rem 0; }
th, td { border: 1px solid var(--border); padding: 0.35rem 0.5rem; vertical-align: top; }
th { text-align: left; color: var(--muted); font-weight: 600; }

pre {
  white-space: pre-wrap;
  word-break: break-word;
  margin: 0.75rem 0;
  padding: 0.5rem 0.75rem;
  border: 1px solid var(--border);
  background: #f6f8fa;
}

code { font-family: var(--mono); font-size: 14px; }
p code, li code { background: #f3f4f6; padding: 0.1rem 0.25rem; }

blockquote {
  margin: 0.75rem 0;
  padding: 0 0.75rem;
  border-left: 3px solid var(--border);
  color: var(--muted);
}

@media print {
  body { background: #fff; color: #000; }
  a { color: #000; text-decoration: underline; }
}
"""
