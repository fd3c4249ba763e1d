class ModError(Exception):
 """Module could not be decoded."""

class Truncated(ModError):
 def __init__(self,what,offset,wanted,got):
  self.what=what;self.offset=offset;self.wanted=wanted;self.got=got
  super().__init__(f"truncated reading {what} at byte {offset}: wanted {wanted}, got {got}")

class SizeMismatch(ModError):
 def __init__(self,size,small,large):
  self.size=size;self.small=small;self.large=large
  super().__init__(f"file size was {size}, expected {small} or {large}")

# ── non-fatal anomalies ───────────────────────────────────────────────────────
class Diag:
 """Recorded anomaly. where=(order,pattern,row) for playback, None for parsing."""
 __slots__=('kind','text','where')
 def __init__(self,kind,text,where=None):
  self.kind=kind;self.text=text;self.where=where
 def __repr__(self):return f"Diag({self.kind!r},{self.text!r},{self.where!r})"
 def __str__(self):
  if self.where is None:return self.text
  o,p,r=self.where
  return f"{o:2d}({p:2d}):{r:2d}: {self.text}"

def flag(diags,log,kind,text,where=None):
 d=Diag(kind,text,where);diags.append(d)
 log.warning('%s',d)
 return d
