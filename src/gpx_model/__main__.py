from gpx_model.cli import main

main()
