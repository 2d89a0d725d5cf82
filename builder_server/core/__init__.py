# builder_server/core/__init__.py
