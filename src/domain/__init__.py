"""Domain layer - app metadata, credentials and ports.

The domain layer has NO dependencies on any framework or infrastructure -
it is pure Python.

Structure:
- value_objects/: Value objects (AppConfig, ClientCredentials, requests)
- registry.py: AppRegistry (app name -> AppConfig)
- protocols/: Ports implemented by infrastructure (transport, logger)
- errors/: Error values returned in Result types
- enums/: Domain enums
"""
