"""Layout variant detection from the tag at byte 1080."""
from .conf import MOD_TAGS,TAG_OFFSET

class Fmt:
 """Layout variant. tag=='' is the untagged 15-instrument layout."""
 __slots__=('tag','channels','instruments')
 def __init__(self,tag,channels,instruments):
  self.tag=tag;self.channels=channels;self.instruments=instruments
 @property
 def known(self):return self.tag!=''
 def __eq__(self,o):
  return isinstance(o,Fmt) and (self.tag,self.channels,self.instruments)==(o.tag,o.channels,o.instruments)
 def __hash__(self):return hash((self.tag,self.channels,self.instruments))
 def __repr__(self):return f"Fmt({self.tag!r},{self.channels}ch,{self.instruments}smp)"

UNKNOWN=Fmt('',4,16)

def classify(tag):
 if tag in MOD_TAGS:
  nc,ns=MOD_TAGS[tag]
  return Fmt(tag.decode('latin-1'),nc,ns)
 return UNKNOWN

def detect(f):
 """Peek the tag, then rewind f to the start."""
 f.seek(TAG_OFFSET)
 tag=f.read(4)
 f.seek(0)
 return classify(tag)
