"""Assemble the CMS admin configuration document and render it as YAML."""

import logging
from typing import Any

import yaml

from . import builders as cms
from .config import Settings
from .nodes import Collection

logger = logging.getLogger(__name__)


def build_collections() -> list[Collection]:
    """Content schema of the site, in the order the editor lists it."""
    return [
        cms.file_collection("Conteúdo", {"name": "conteudo"}, [
            cms.file_collection_entry("SEO", None, [
                cms.string(
                    "URL",
                    name="url",
                    hint="URL final do site, sem a última barra. Ex: https://exemplo.com.br",
                ),
                cms.string("Título", name="titulo"),
                cms.string("H1", name="h1"),
                cms.text("Descrição", name="descricao"),
                cms.image("Imagem de compartilhamento", name="imagem_de_compartilhamento"),
                cms.string("Palavras-chave", name="palavras_chave"),
            ]),
        ]),
    ]


def build_config(settings: Settings) -> dict[str, Any]:
    """Build the root mapping the CMS admin reads as ``config.yml``."""
    collections = build_collections()
    return {
        "locale": settings.locale,
        "backend": settings.backend.model_dump(),
        "media_folder": settings.media_folder,
        "public_folder": settings.public_folder,
        "local_backend": settings.local_backend,
        "collections": [collection.to_dict() for collection in collections],
    }


def render_config(settings: Settings) -> str:
    config = build_config(settings)
    logger.debug(f"Rendering config with {len(config['collections'])} collection(s)")
    return yaml.safe_dump(
        config,
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
    )
