"""Text views of a loaded module."""

def summary(m):
 nbytes=sum(len(s.data) for s in m.instruments[1:])
 return (f'Title: "{m.title}" -- format: "{m.fmt.tag}" -- {nbytes} bytes of sample data\n'
         f"Table: {' '.join(str(v) for v in m.table)}\n"
         f"File size: {m.size} ({m.unread} unread bytes)\n")

def instruments(m):
 return ''.join(f"{s.name:>22} ({len(s.data):5d} bytes) - ft {s.ft}, v {s.vol}, rep {s.loop_start} {s.loop_len}\n"
                for s in m.instruments[1:])

def pattern(m,n):
 return ''.join('| '+''.join(f"{c.inst:3d} - {c.period:3d} |" for c in row)+'\n'
                for row in m.patterns[n].rows)

def dump(m):
 """Every pattern in table order, then the summary and instrument list."""
 out=''.join(f"Pattern {v}.....\n"+pattern(m,v) for v in m.table)
 return out+'\n'+summary(m)+'\n'+instruments(m)
