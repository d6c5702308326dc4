from textgame.main import main

raise SystemExit(main())
