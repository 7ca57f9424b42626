class Style:
    regular = 'default'
    info = 'bold blue'
    context = 'dim cyan'
    mark = 'bold magenta'
    good = 'bold green'
    bad = 'bold red'
