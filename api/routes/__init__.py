# api.routes package
