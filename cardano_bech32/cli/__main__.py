from cardano_bech32.cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
