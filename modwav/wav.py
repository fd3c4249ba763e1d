"""Stereo float32 frame buffer with WAV persistence."""
import numpy as np
import soundfile as sf

from .conf import SR

class Wav:
 __slots__=('data','rate')
 def __init__(self,frames=0,rate=SR):
  self.data=np.zeros((int(frames),2),dtype=np.float32);self.rate=rate

 @classmethod
 def of(cls,arr,rate=SR):
  w=cls(0,rate);w.data=np.asarray(arr,dtype=np.float32).reshape(-1,2)
  return w

 def frame_count(self):return len(self.data)
 __len__=frame_count

 def get(self,i):
  l,r=self.data[i];return float(l),float(r)

 def set(self,i,left,right):self.data[i]=(left,right)

 def write(self,start,frames):
  """Copy (n,2) frames in at start."""
  self.data[start:start+len(frames)]=frames

 def grow(self,frames):
  """Ensure capacity for frames, doubling."""
  n=len(self.data)
  if frames<=n:return
  new=np.zeros((max(frames,n*2),2),dtype=np.float32)
  new[:n]=self.data;self.data=new

 def add(self,start,src,src_start,length,gain=1.0,balance=0.0):
  """Mix src[src_start:src_start+length] in at start.

  balance -1..1 pulls toward left/right; 0 leaves both sides at gain."""
  length=max(0,min(length,len(src.data)-src_start,len(self.data)-start))
  if not length:return
  lg=gain*min(1.0,1.0-balance);rg=gain*min(1.0,1.0+balance)
  chunk=src.data[src_start:src_start+length]
  self.data[start:start+length,0]+=chunk[:,0]*lg
  self.data[start:start+length,1]+=chunk[:,1]*rg

 def save(self,path,subtype='PCM_16'):
  sf.write(str(path),np.clip(self.data,-1.0,1.0),self.rate,subtype=subtype)

 @classmethod
 def load(cls,path):
  data,rate=sf.read(str(path),dtype='float32',always_2d=True)
  if data.shape[1]==1:data=np.repeat(data,2,axis=1)
  return cls.of(data[:,:2],rate)
