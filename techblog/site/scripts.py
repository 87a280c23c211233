"""Inline browser scripts used by the static site generator."""

from __future__ import annotations

import json

# Runs in <head> before paint so the stored theme never flashes.
THEME_INIT = r"""
(function () {
  try {
    var stored = localStorage.getItem("theme");
    var system = window.matchMedia("(prefers-color-scheme: dark)").matches ? "dark" : "light";
    var theme = stored === "dark" || stored === "light" ? stored : system;
    document.documentElement.classList.toggle("dark", theme === "dark");
  } catch (e) {}
})();
"""

THEME_TOGGLE = r"""
(function () {
  var button = document.querySelector("[data-theme-toggle]");
  if (!button) return;
  button.addEventListener("click", function () {
    var dark = !document.documentElement.classList.contains("dark");
    document.documentElement.classList.toggle("dark", dark);
    try { localStorage.setItem("theme", dark ? "dark" : "light"); } catch (e) {}
  });
})();
"""

_TOC_TRACKER = r"""
(function (rootMargin, selector) {
  var nav = document.querySelector("nav.toc");
  if (!nav || !("IntersectionObserver" in window)) return;
  var headings = Array.prototype.slice.call(document.querySelectorAll(selector)).filter(function (el) { return el.id; });

  function setActive(id) {
    nav.querySelectorAll("li").forEach(function (li) {
      var link = li.querySelector("a[data-toc-target]");
      var active = !!link && link.getAttribute("data-toc-target") === id;
      li.classList.toggle("active", active);
      if (link) {
        if (active) link.setAttribute("aria-current", "true");
        else link.removeAttribute("aria-current");
      }
    });
  }

  var observer = new IntersectionObserver(function (entries) {
    entries.forEach(function (entry) {
      if (entry.isIntersecting) setActive(entry.target.id);
    });
  }, { rootMargin: rootMargin });
  headings.forEach(function (el) { observer.observe(el); });

  nav.addEventListener("click", function (event) {
    var link = event.target.closest("a[data-toc-target]");
    if (!link) return;
    event.preventDefault();
    var target = document.getElementById(link.getAttribute("data-toc-target"));
    if (target) target.scrollIntoView({ behavior: "smooth", block: "start" });
  });

  window.addEventListener("pagehide", function () { observer.disconnect(); });
})(%(root_margin)s, %(selector)s);
"""


def toc_script(root_margin: str, levels: tuple[int, ...]) -> str:
    """Browser rendition of the tracker and navigator for a rendered page."""
    selector = ", ".join(f"article h{level}" for level in levels)
    return _TOC_TRACKER % {
        "root_margin": json.dumps(root_margin),
        "selector": json.dumps(selector),
    }
