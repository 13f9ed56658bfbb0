"""Résolution des références de fichier de dépôts VCS."""

from pathlib import Path


def resolve_vcs_repo_file_url(vcs_repo_file_url: str) -> str:
    """Convertit un chemin local en URL file://.

    Le fichier .repos peut être passé sous forme d'URL ou de chemin.
    Un chemin existant est converti en URL absolue (file://...) ;
    toute autre valeur (URL déjà formée) est retournée inchangée.

    Args:
        vcs_repo_file_url: Chemin ou URL du fichier de dépôts.

    Returns:
        URL du fichier de dépôts.
    """
    path = Path(vcs_repo_file_url)
    if vcs_repo_file_url and path.exists():
        return path.resolve().as_uri()
    return vcs_repo_file_url
