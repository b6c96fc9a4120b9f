from localshortener.cli import main


raise SystemExit(main())
