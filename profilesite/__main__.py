from profilesite.build_site import main

raise SystemExit(main())
