"""Server-rendered pages: link generator, app landing/redirect page, APK instructions.

Plain Jinja2 templates plus a small inline script per page; no frontend build step.
"""
