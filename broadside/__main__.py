from broadside.main import main

raise SystemExit(main())
