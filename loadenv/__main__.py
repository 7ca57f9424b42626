from loadenv.cli import main

main(prog_name='loadenv')
