"""
Blog Build (bb) - Build and deploy tasks for a static blog

Drives an external static-site generator and ships the result:
- Clean the generated output directory
- Build or live-preview the site with a recipe and theme
- Package the output as a zip archive
- Deploy the archive to the hosting API with a bearer token
"""

__version__ = "0.1.0"
__package_name__ = "blog-build"
__short_name__ = "bb"
