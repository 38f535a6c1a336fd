"""Base CSS for the built-in layouts.

Colours and fonts refer to the theme's CSS custom properties, which the
generated stylesheet defines ahead of this block.
"""

CSS = r"""
:root {
  --bg: var(--color-white);
  --fg: var(--color-gray-900);
  --muted: var(--color-gray-500);
  --border: var(--color-gray-200);
  --link: var(--color-blue-600);
  --page-max: 720px;
}

*, *::before, *::after { box-sizing: border-box; }

html, body { height: 100%; }

body {
  font-family: var(--font-serif);
  font-size: 17px;
  line-height: 1.7;
  max-width: var(--page-max);
  margin: 0 auto;
  padding: 2.25rem 1.5rem 3rem;
  background: var(--bg);
  color: var(--fg);
  text-rendering: optimizeLegibility;
  -webkit-font-smoothing: antialiased;
}

a { color: var(--link); text-decoration: none; }
a:hover { text-decoration: underline; text-underline-offset: 0.15em; }

header {
  display: flex;
  justify-content: space-between;
  align-items: baseline;
  border-bottom: 1px solid var(--border);
  padding-bottom: 0.75rem;
  margin-bottom: 2rem;
  gap: 0.5rem 1rem;
  flex-wrap: wrap;
  font-family: var(--font-sans);
}

nav a { margin-left: 1rem; color: var(--muted); font-size: 14px; }

h1, h2, h3 { margin: 1.5rem 0 0.75rem 0; font-weight: 600; line-height: 1.3; }
h1 { font-family: var(--font-title); font-size: 2rem; margin-top: 0; }
h2 { font-size: 1.35rem; }
h3 { font-size: 1.1rem; }

.muted { color: var(--muted); font-size: 14px; font-family: var(--font-sans); }
.summary { color: var(--muted); margin: 0.25rem 0 0 0; }

ul.posts { list-style: none; padding-left: 0; }
ul.posts li { margin: 0 0 1.5rem 0; }
ul.posts a { font-family: var(--font-title); font-size: 1.25rem; }

ul { margin: 0.75rem 0; padding-left: 1.25rem; }
ol { margin: 0.75rem 0; padding-left: 1.5rem; }
li { margin: 0.35rem 0; }

table { border-collapse: collapse; width: 100%; margin: 0.75rem 0; }
th, td { border: 1px solid var(--border); padding: 0.35rem 0.5rem; vertical-align: top; }
th { text-align: left; color: var(--muted); font-weight: 600; }

pre, .highlight pre {
  white-space: pre;
  overflow-x: auto;
  margin: 1rem 0;
  padding: 0.75rem 1rem;
  border: 1px solid var(--border);
  background: var(--color-gray-50);
  font-size: 14px;
}

code { font-family: var(--font-mono); font-size: 0.9em; }
p code, li code { background: var(--color-gray-100); padding: 0.1rem 0.25rem; }

img { max-width: 100%; height: auto; }

blockquote {
  margin: 1rem 0;
  padding: 0 1rem;
  border-left: 3px solid var(--border);
  color: var(--muted);
}

hr { border: none; border-top: 1px solid var(--border); margin: 2rem 0; }

footer { margin-top: 3rem; border-top: 1px solid var(--border); padding-top: 1rem; }

@media print {
  body { background: #fff; color: #000; max-width: none; padding: 1rem; }
  a { color: #000; text-decoration: underline; }
}

@media (max-width: 700px) {
  body { padding: 1.5rem 1rem 2rem; }
  nav a { margin-left: 0; margin-right: 1rem; }
}
"""
