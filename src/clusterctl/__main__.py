"""clusterctl 패키지 진입점."""

from clusterctl.cli import main

if __name__ == "__main__":
    main()
