"""Static type catalogs answered without a network call.

Mirrored from the ``type`` enum of ``POST /services`` and the
``/databases/{type}`` create paths of the Coolify OpenAPI document. The lists
are not checked against the live instance; refresh them when the upstream
schema changes.
"""

CATALOG_SOURCE = "coolify openapi v4.0.0-beta"

SERVICE_TYPES: tuple[str, ...] = (
    "activepieces",
    "appsmith",
    "appwrite",
    "authentik",
    "babybuddy",
    "budge",
    "changedetection",
    "chatwoot",
    "classicpress-with-mariadb",
    "classicpress-with-mysql",
    "classicpress-without-database",
    "cloudflared",
    "code-server",
    "dashboard",
    "directus",
    "directus-with-postgresql",
    "docker-registry",
    "docuseal",
    "docuseal-with-postgres",
    "dokuwiki",
    "duplicati",
    "emby",
    "embystat",
    "fider",
    "filebrowser",
    "firefly",
    "formbricks",
    "ghost",
    "gitea",
    "gitea-with-mariadb",
    "gitea-with-mysql",
    "gitea-with-postgresql",
    "glance",
    "glances",
    "glitchtip",
    "grafana",
    "grafana-with-postgresql",
    "grocy",
    "heimdall",
    "homepage",
    "jellyfin",
    "kuzzle",
    "listmonk",
    "logto",
    "mediawiki",
    "meilisearch",
    "metabase",
    "metube",
    "minio",
    "moodle",
    "n8n",
    "n8n-with-postgresql",
    "next-image-transformation",
    "nextcloud",
    "nocodb",
    "odoo",
    "openblocks",
    "pairdrop",
    "penpot",
    "phpmyadmin",
    "pocketbase",
    "posthog",
    "reactive-resume",
    "rocketchat",
    "shlink",
    "slash",
    "snapdrop",
    "statusnook",
    "stirling-pdf",
    "supabase",
    "syncthing",
    "tolgee",
    "trigger",
    "trigger-with-external-database",
    "twenty",
    "umami",
    "unleash-with-postgresql",
    "unleash-without-database",
    "uptime-kuma",
    "vaultwarden",
    "vikunja",
    "weblate",
    "whoogle",
    "wordpress-with-mariadb",
    "wordpress-with-mysql",
    "wordpress-without-database",
)

DATABASE_TYPES: tuple[str, ...] = (
    "clickhouse",
    "dragonfly",
    "keydb",
    "mariadb",
    "mongodb",
    "mysql",
    "postgresql",
    "redis",
)

SERVICE_CATEGORIES: dict[str, tuple[str, ...]] = {
    "CMS & Blogging": (
        "wordpress-with-mariadb",
        "wordpress-with-mysql",
        "wordpress-without-database",
        "ghost",
        "classicpress-with-mariadb",
        "classicpress-with-mysql",
        "classicpress-without-database",
        "mediawiki",
    ),
    "Development & Tools": (
        "gitea",
        "gitea-with-mariadb",
        "gitea-with-mysql",
        "gitea-with-postgresql",
        "code-server",
        "docker-registry",
        "n8n",
        "n8n-with-postgresql",
    ),
    "Productivity & Business": (
        "appsmith",
        "directus",
        "directus-with-postgresql",
        "formbricks",
        "nocodb",
        "pocketbase",
        "twenty",
        "odoo",
    ),
    "Media & Entertainment": ("jellyfin", "emby", "embystat", "metube"),
    "Monitoring & Analytics": (
        "grafana",
        "grafana-with-postgresql",
        "uptime-kuma",
        "glances",
        "umami",
        "posthog",
        "statusnook",
    ),
    "Communication": ("chatwoot", "rocketchat", "authentik"),
    "File Management": ("filebrowser", "nextcloud", "minio", "syncthing", "duplicati"),
}


def group_service_types() -> dict[str, list[str]]:
    """Group ``SERVICE_TYPES`` by category; anything unlisted lands in "Other"."""
    grouped: dict[str, list[str]] = {}
    categorized: set[str] = set()
    for category, members in SERVICE_CATEGORIES.items():
        present = [t for t in SERVICE_TYPES if t in members]
        if present:
            grouped[category] = present
        categorized.update(members)
    other = [t for t in SERVICE_TYPES if t not in categorized]
    if other:
        grouped["Other"] = other
    return grouped
