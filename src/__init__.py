"""
Source Code Root Module

Device Gate verifies that network devices, identified by their MAC id,
are registered and not blocked.

Layer Structure:
- Domain: Device entity, verification outcome types, repository contracts
- Application: Use cases (service layer) and DTOs
- Infrastructure: MongoDB client, repositories and health checks
- Presentation: FastAPI controllers
- Shared: Cross-cutting helpers, constants and logging
- Main: Composition root, application entry point and configuration
"""
