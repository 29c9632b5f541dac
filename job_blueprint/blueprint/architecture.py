# job_blueprint/blueprint/architecture.py
from __future__ import annotations

from typing import Any, List, Mapping

from job_blueprint.blueprint import templates as T
from job_blueprint.models import (
    ApiEndpoint,
    ArchitectureBlueprint,
    ArchitectureModule,
    DataModel,
    DetectionResult,
)


def _module(entry: Mapping[str, Any]) -> ArchitectureModule:
    return ArchitectureModule(
        name=entry["name"],
        responsibility=entry["responsibility"],
        dependencies=list(entry["dependencies"]),
        technologies=list(entry["technologies"]),
    )


def _data_model(entry: Mapping[str, Any]) -> DataModel:
    return DataModel(
        entity=entry["entity"],
        fields=dict(entry["fields"]),
        relationships=list(entry["relationships"]),
        indexes=list(entry["indexes"]),
    )


def wants_service_mesh(stack: DetectionResult) -> bool:
    # "microservices" is a specialization key; platforms is checked too so a
    # custom table that files it there still gets the module.
    return (
        stack.has("platforms", "microservices")
        or stack.has("specializations", "microservices")
        or stack.has("specializations", "distributed")
    )


def build_modules(stack: DetectionResult) -> List[ArchitectureModule]:
    modules = [
        ArchitectureModule(
            name="API Gateway",
            responsibility="Route requests, handle authentication, rate limiting, and request validation",
            dependencies=["Auth Service"],
            technologies=["HTTP", "REST/GraphQL"],
        ),
        ArchitectureModule(
            name="Authentication & Authorization",
            responsibility="User authentication, JWT/OAuth management, and permission enforcement",
            dependencies=[],
            technologies=["JWT", "OAuth 2.0", "RBAC"],
        ),
        ArchitectureModule(
            name="Core Business Logic",
            responsibility="Implement domain-specific business rules and workflows",
            dependencies=["Data Access Layer", "External Services"],
            technologies=list(stack.frameworks),
        ),
        ArchitectureModule(
            name="Data Access Layer",
            responsibility="Database operations, caching, and query optimization",
            dependencies=[],
            technologies=list(stack.databases),
        ),
    ]

    if stack.has("domains", "ml"):
        modules.append(_module(T.ML_MODULE))
    if wants_service_mesh(stack):
        modules.append(_module(T.SERVICE_MESH_MODULE))

    return modules


def build_data_models(stack: DetectionResult) -> List[DataModel]:
    models = [_data_model(T.USER_MODEL), _data_model(T.SESSION_MODEL)]
    if any(stack.has("domains", d) for d in T.TRANSACTION_DOMAINS):
        models.append(_data_model(T.TRANSACTION_MODEL))
    return models


def build_api_endpoints() -> List[ApiEndpoint]:
    # Same five endpoints for every stack.
    # TODO: derive resource endpoints from the detected domains (e.g. /api/transactions for fintech).
    return [ApiEndpoint(**{k: (dict(v) if isinstance(v, Mapping) else v) for k, v in ep.items()}) for ep in T.API_ENDPOINTS]


def build_integrations(stack: DetectionResult, description: str) -> List[str]:
    desc = (description or "").lower()
    integrations = [label for key, label in T.PLATFORM_INTEGRATIONS if stack.has("platforms", key)]
    integrations += [label for kw, label in T.KEYWORD_INTEGRATIONS if kw in desc]
    return integrations or list(T.DEFAULT_INTEGRATIONS)


def build_non_functional(stack: DetectionResult) -> List[str]:
    reqs = list(T.BASE_NON_FUNCTIONAL)
    reqs += [label for bucket, key, label in T.NON_FUNCTIONAL_RULES if stack.has(bucket, key)]
    return reqs


def build_security(stack: DetectionResult, description: str) -> List[str]:
    considerations = list(T.BASE_SECURITY)
    if stack.has("domains", "fintech"):
        considerations += T.FINTECH_SECURITY
    if "user data" in (description or "").lower():
        considerations += T.USER_DATA_SECURITY
    return considerations


def scaling_strategy(stack: DetectionResult) -> str:
    if stack.has("specializations", "microservices"):
        return T.SCALING_MICROSERVICES
    if stack.has("platforms", "kubernetes"):
        return T.SCALING_KUBERNETES
    return T.SCALING_DEFAULT


def build_architecture(stack: DetectionResult, description: str) -> ArchitectureBlueprint:
    overview = (
        f"A scalable, modular architecture designed for the {', '.join(stack.domains)} domain(s) "
        f"using {', '.join(stack.languages)} with {', '.join(stack.frameworks)} frameworks "
        f"and {', '.join(stack.databases)} databases."
    )
    return ArchitectureBlueprint(
        overview=overview,
        modules=build_modules(stack),
        data_models=build_data_models(stack),
        apis=build_api_endpoints(),
        integrations=build_integrations(stack, description),
        non_functional_requirements=build_non_functional(stack),
        security_considerations=build_security(stack, description),
        scaling_strategy=scaling_strategy(stack),
    )


def minimal_architecture() -> ArchitectureBlueprint:
    return ArchitectureBlueprint(
        overview=T.MINIMAL_ARCHITECTURE_OVERVIEW,
        modules=[],
        data_models=[],
        apis=[],
        integrations=[],
        non_functional_requirements=[],
        security_considerations=[],
        scaling_strategy="",
    )
