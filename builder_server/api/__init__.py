# builder_server/api/__init__.py
