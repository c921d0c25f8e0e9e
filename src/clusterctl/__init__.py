"""clusterctl - Cluster user management CLI.
클러스터 사용자 관리 CLI."""

__version__ = "0.1.0"
